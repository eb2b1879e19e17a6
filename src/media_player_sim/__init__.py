"""
Media Player Simulation
Synthetic codec timing and audio buffer statistics report
"""

__version__ = "1.0.0"

from .metadata import MediaMetadata, initialize_media_resource
from .buffer import AudioBuffer, generate_buffer
from .codec import ZeroProcessingTimeError, compute_efficiency, simulate_codec_processing
from .report import PerformanceSummary, generate_performance_analytics
from .simulation import MediaPlayerSimulation, run_simulation

__all__ = [
    'MediaMetadata', 'initialize_media_resource',
    'AudioBuffer', 'generate_buffer',
    'ZeroProcessingTimeError', 'compute_efficiency', 'simulate_codec_processing',
    'PerformanceSummary', 'generate_performance_analytics',
    'MediaPlayerSimulation', 'run_simulation',
]
