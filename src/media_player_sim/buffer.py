"""
Synthetic audio buffer generator
- Amplitude-modulated single sine period across the whole buffer
- Peak and RMS computed once from the samples
- Samples array is read-only after construction
"""

import numpy as np
from dataclasses import dataclass

TWO_PI = 2.0 * np.pi
MOD_CENTER = 0.5
MOD_DEPTH = 0.3
MOD_RATE = 0.1  # radians per sample


@dataclass(frozen=True, eq=False)
class AudioBuffer:
    """
    Generated sample data plus derived statistics.

    processed_sample_count always equals len(sample_data_array).
    """
    sample_data_array: np.ndarray
    peak_amplitude_level: float
    rms_power_level: float
    processed_sample_count: int

    def __len__(self) -> int:
        return self.processed_sample_count


def generate_buffer(buffer_size: int, verbose: bool = False) -> AudioBuffer:
    """
    Generate a deterministic synthetic buffer.

    sample(i) = sin(2*pi*i/L) * (0.5 + 0.3*sin(0.1*i))

    Args:
        buffer_size: Number of samples L (must be > 0)
        verbose: Print a [Buffer] diagnostic line

    Returns:
        AudioBuffer with peak = max|sample| and rms = sqrt(sum(sample^2)/L)

    Raises:
        ValueError: if buffer_size is not positive
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    index = np.arange(buffer_size, dtype=np.float64)
    samples = np.sin(TWO_PI * index / buffer_size)
    samples *= MOD_CENTER + MOD_DEPTH * np.sin(index * MOD_RATE)
    samples.setflags(write=False)

    peak = float(np.max(np.abs(samples)))
    rms = float(np.sqrt(np.sum(samples * samples) / buffer_size))

    if verbose:
        print(f"[Buffer] Generated {buffer_size} samples: peak={peak:.4f} rms={rms:.4f}")

    return AudioBuffer(
        sample_data_array=samples,
        peak_amplitude_level=peak,
        rms_power_level=rms,
        processed_sample_count=buffer_size,
    )


# Name used by the original report code
process_audio_buffer = generate_buffer
