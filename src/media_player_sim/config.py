#!/usr/bin/env python3
"""
Configuration for the media player simulation
Environment overrides on top of fixed defaults
"""

import math
import os
from dataclasses import dataclass
from typing import Dict, Any

# Defaults (a clean environment reproduces the reference run)
TOTAL_SIMULATION_CYCLES = 10
AUDIO_BUFFER_SIZE = 1024
SAMPLE_RATE = 44100.0       # informational only
VIDEO_FRAME_RATE = 30       # informational only
CODEC_PROCESSING_DELAY_MS = 100

# Primary media resource
RESOURCE_IDENTIFIER = "professional_audio_sample.mp3"
RESOURCE_FORMAT = "MP3"
RESOURCE_DURATION_SECONDS = 180.0
RESOURCE_BIT_RATE_KBPS = 320

# Report thresholds
OPTIMAL_PROCESSING_TIME_MS = 150.0
SUFFICIENT_PEAK_AMPLITUDE = 0.8
REFERENCE_BIT_RATE_KBPS = 320.0


@dataclass(frozen=True)
class SimulationConfig:
    """Resolved run configuration"""
    cycles: int = TOTAL_SIMULATION_CYCLES
    buffer_size: int = AUDIO_BUFFER_SIZE
    sample_rate: float = SAMPLE_RATE
    frame_rate: int = VIDEO_FRAME_RATE
    codec_delay_ms: int = CODEC_PROCESSING_DELAY_MS
    verbose: bool = False


def _env_int(name: str, default: int, minimum: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a positive finite number, got {value}")
    return value


def is_verbose() -> bool:
    return os.environ.get('MEDIASIM_VERBOSE', '0') == '1'


def get_config() -> SimulationConfig:
    """
    Read configuration from the environment.

    Raises:
        ValueError: if a variable is set to an unusable value
    """
    return SimulationConfig(
        cycles=_env_int('MEDIASIM_CYCLES', TOTAL_SIMULATION_CYCLES, 1),
        buffer_size=_env_int('MEDIASIM_BUFFER_SIZE', AUDIO_BUFFER_SIZE, 1),
        sample_rate=_env_float('MEDIASIM_SAMPLE_RATE', SAMPLE_RATE),
        frame_rate=_env_int('MEDIASIM_FRAME_RATE', VIDEO_FRAME_RATE, 1),
        codec_delay_ms=_env_int('MEDIASIM_CODEC_DELAY_MS', CODEC_PROCESSING_DELAY_MS, 0),
        verbose=is_verbose(),
    )


def config_sections(config: SimulationConfig) -> Dict[str, Dict[str, Any]]:
    return {
        'Simulation': {
            'cycles': config.cycles,
            'codec_delay_ms': config.codec_delay_ms,
        },
        'Audio': {
            'buffer_size': config.buffer_size,
            'sample_rate': config.sample_rate,
            'frame_rate': config.frame_rate,
        },
        'Debug': {
            'verbose': config.verbose,
        },
    }


def print_config(config: SimulationConfig = None):
    """Print current configuration"""
    if config is None:
        config = get_config()

    print("\n" + "=" * 60)
    print("MEDIA PLAYER SIMULATION - CONFIGURATION")
    print("=" * 60)

    for section, values in config_sections(config).items():
        print(f"\n{section}:")
        for key, value in values.items():
            print(f"  {key}: {value}")

    print("\n" + "=" * 60 + "\n")


if __name__ == "__main__":
    print_config()
