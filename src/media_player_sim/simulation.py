#!/usr/bin/env python3
"""
Media player simulation driver
Builds the resource and buffer once, runs the codec cycles with
progress output, then prints the performance report.
"""

import sys
from dataclasses import dataclass, field
from typing import List, Optional

from .buffer import AudioBuffer, generate_buffer
from .codec import ZeroProcessingTimeError, compute_efficiency, run_codec_cycle
from .config import (
    RESOURCE_BIT_RATE_KBPS,
    RESOURCE_DURATION_SECONDS,
    RESOURCE_FORMAT,
    RESOURCE_IDENTIFIER,
    SimulationConfig,
    get_config,
)
from .metadata import MediaMetadata, initialize_media_resource
from .progress import display_progress_visualization
from .report import PerformanceSummary, generate_performance_analytics


@dataclass
class MeasurementSeries:
    """
    Index-aligned per-cycle measurements.
    Entry i belongs to cycle i + 1.
    """
    processing_times_ms: List[float] = field(default_factory=list)
    efficiencies: List[float] = field(default_factory=list)

    def record(self, processing_time_ms: float, efficiency: float) -> None:
        self.processing_times_ms.append(processing_time_ms)
        self.efficiencies.append(efficiency)

    def __len__(self) -> int:
        return len(self.processing_times_ms)


@dataclass
class SimulationResult:
    media: MediaMetadata
    buffer: AudioBuffer
    measurements: MeasurementSeries
    summary: PerformanceSummary


class MediaPlayerSimulation:
    """
    Sequential simulation run.

    Single-threaded: each cycle blocks on its delay before the next starts.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 media: Optional[MediaMetadata] = None):
        self.config = config if config is not None else get_config()
        self.media = media if media is not None else initialize_media_resource(
            RESOURCE_IDENTIFIER,
            RESOURCE_FORMAT,
            RESOURCE_DURATION_SECONDS,
            RESOURCE_BIT_RATE_KBPS,
        )
        self.buffer: Optional[AudioBuffer] = None
        self.measurements = MeasurementSeries()

    def print_header(self):
        print("Professional Media Player Processing System v1.0")
        print("Advanced Codec Processing and Audio Analysis Framework")
        print("=" * 60)

    def print_media_configuration(self):
        media = self.media
        print("\nMEDIA RESOURCE CONFIGURATION:")
        print("-" * 40)
        print(f"Resource Identifier: {media.file_identifier}")
        print(f"Format Specification: {media.format_specification}")
        print(f"Duration Parameters: {media.duration_seconds:.1f} seconds")
        print(f"Bit Rate Configuration: {media.bit_rate_kbps} kbps")
        print(f"Codec Compatibility: {'SUPPORTED' if media.codec_support_status else 'UNSUPPORTED'}")

    def print_buffer_configuration(self):
        print("\nAUDIO BUFFER CONFIGURATION:")
        print("-" * 40)
        print(f"Buffer Capacity: {self.config.buffer_size} samples")
        print(f"Sampling Frequency: {self.config.sample_rate:.1f} Hz")
        print("Processing Framework: Real-time audio analysis")

    def run_cycle(self, cycle_number: int) -> None:
        cycle = run_codec_cycle(
            self.media, cycle_number, self.config.codec_delay_ms, verbose=self.config.verbose
        )
        efficiency = compute_efficiency(cycle.processing_time_ms, self.media.bit_rate_kbps)
        self.measurements.record(cycle.processing_time_ms, efficiency)
        display_progress_visualization(
            cycle_number, self.config.cycles, cycle.processing_time_ms, efficiency
        )

    def run(self) -> SimulationResult:
        """
        Run the full simulation and print the report.

        Raises:
            ZeroProcessingTimeError: if a cycle measured 0ms (only possible
                with MEDIASIM_CODEC_DELAY_MS=0 on a fast host)
        """
        # Each run reports only its own cycles
        self.buffer = None
        self.measurements = MeasurementSeries()

        if self.config.verbose:
            print(f"[Simulator] Starting: {self.config.cycles} cycles, "
                  f"{self.config.codec_delay_ms}ms delay, {self.config.buffer_size} samples")

        self.print_header()
        self.print_media_configuration()

        self.buffer = generate_buffer(self.config.buffer_size, verbose=self.config.verbose)
        self.print_buffer_configuration()

        print("\nINITIATING MEDIA PROCESSING SIMULATION:")
        print("-" * 40)

        for cycle_number in range(1, self.config.cycles + 1):
            self.run_cycle(cycle_number)

        summary = generate_performance_analytics(
            self.measurements.processing_times_ms,
            self.measurements.efficiencies,
            self.buffer,
        )

        print("\nSYSTEM STATUS: Media processing simulation completed successfully")
        print("All performance metrics have been analyzed and documented")
        print("Program execution terminated with successful status code")

        return SimulationResult(
            media=self.media,
            buffer=self.buffer,
            measurements=self.measurements,
            summary=summary,
        )


def run_simulation(config: Optional[SimulationConfig] = None) -> SimulationResult:
    return MediaPlayerSimulation(config).run()


def main() -> int:
    try:
        run_simulation()
    except ZeroProcessingTimeError as e:
        print(f"\nError: {e}")
        print("Increase MEDIASIM_CODEC_DELAY_MS so every cycle takes at least 1ms")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
