"""
Media resource metadata
"""

from dataclasses import dataclass, field

# Case-sensitive codec allow-list
SUPPORTED_FORMATS = ("MP3", "WAV", "FLAC")


@dataclass(frozen=True)
class MediaMetadata:
    """
    Fixed description of a media resource.

    codec_support_status is derived from format_specification once,
    at construction, and cannot be set by the caller.
    """
    file_identifier: str
    format_specification: str
    duration_seconds: float
    bit_rate_kbps: int
    codec_support_status: bool = field(init=False)

    def __post_init__(self):
        # frozen dataclass: bypass __setattr__ for the derived flag
        object.__setattr__(
            self, 'codec_support_status',
            self.format_specification in SUPPORTED_FORMATS,
        )


def initialize_media_resource(resource_name: str, format_type: str,
                              duration_value: float, bitrate_value: int) -> MediaMetadata:
    """Build metadata from trusted literals. No validation is performed."""
    return MediaMetadata(
        file_identifier=resource_name,
        format_specification=format_type,
        duration_seconds=duration_value,
        bit_rate_kbps=bitrate_value,
    )
