"""
Codec processing simulation
Each cycle blocks for the configured delay, then runs a fixed
1000-step trigonometric workload. Wall-clock time around both
steps is the cycle's processing time.
"""

import time
import numpy as np
from dataclasses import dataclass

from .config import (
    CODEC_PROCESSING_DELAY_MS,
    REFERENCE_BIT_RATE_KBPS,
)
from .metadata import MediaMetadata

WORKLOAD_STEPS = 1000
WORKLOAD_STEP = 0.01
CYCLE_PHASE_STEP = 0.02

# Pre-computed workload terms (identical every cycle)
_WORKLOAD_SINES = np.sin(np.arange(WORKLOAD_STEPS, dtype=np.float64) * WORKLOAD_STEP)


class ZeroProcessingTimeError(ValueError):
    """Raised when efficiency would be computed from a zero processing time"""


@dataclass(frozen=True)
class CodecCycle:
    """Result of one simulated codec cycle"""
    cycle_number: int
    processing_time_ms: float
    workload_index: float


def _run_workload(media_data: MediaMetadata, processing_cycle_number: int) -> float:
    accumulator = float(np.sum(_WORKLOAD_SINES * np.cos(processing_cycle_number * CYCLE_PHASE_STEP)))
    return abs(accumulator) / (media_data.bit_rate_kbps * 0.001)


def run_codec_cycle(media_data: MediaMetadata, processing_cycle_number: int,
                    delay_ms: int = CODEC_PROCESSING_DELAY_MS,
                    verbose: bool = False) -> CodecCycle:
    """
    Run one simulated codec cycle.

    Args:
        media_data: Resource being "decoded" (only bit rate is read)
        processing_cycle_number: 1-based cycle index
        delay_ms: Blocking delay before the workload
        verbose: Print a [Codec] diagnostic line

    Returns:
        CodecCycle with processing time truncated to whole milliseconds
    """
    start = time.perf_counter()

    if delay_ms > 0:
        time.sleep(delay_ms / 1000.0)

    workload = _run_workload(media_data, processing_cycle_number)

    elapsed_ms = float(int((time.perf_counter() - start) * 1000.0))

    if verbose:
        print(f"[Codec] Cycle {processing_cycle_number}: {elapsed_ms:.0f}ms, workload={workload:.4f}")

    return CodecCycle(
        cycle_number=processing_cycle_number,
        processing_time_ms=elapsed_ms,
        workload_index=workload,
    )


def simulate_codec_processing(media_data: MediaMetadata, processing_cycle_number: int,
                              delay_ms: int = CODEC_PROCESSING_DELAY_MS) -> float:
    """Return the measured processing time of one cycle in milliseconds."""
    return run_codec_cycle(media_data, processing_cycle_number, delay_ms).processing_time_ms


def compute_efficiency(processing_time_ms: float, bit_rate_kbps: int) -> float:
    """
    Synthetic efficiency index: (1000 / t) * (bitrate / 320).

    Raises:
        ZeroProcessingTimeError: if processing_time_ms is not positive
    """
    if processing_time_ms <= 0:
        raise ZeroProcessingTimeError(
            f"Cannot compute efficiency from processing time {processing_time_ms}ms"
        )
    return (1000.0 / processing_time_ms) * (bit_rate_kbps / REFERENCE_BIT_RATE_KBPS)
