"""
FFMPEG Stages - staged, order-aware construction of ffmpeg command lines.

    new().override().input("movie.mkv").t(30).output("out.mkv").build()

Each stage only exposes the operations that are legal at that point of
the command, and build() serializes the result without running it.
"""

from ffmpeg_stages.common import (
    IncompleteCommand,
    InvalidArgument,
    StagesError,
    ValidationResult,
)
from ffmpeg_stages.duration import format_duration
from ffmpeg_stages.filter_stage import FilterStage
from ffmpeg_stages.filters import AtomicFilter, Chain, Filter, Pipeline
from ffmpeg_stages.global_stage import GlobalStage, new
from ffmpeg_stages.input import ReadStage
from ffmpeg_stages.output import WriteStage
from ffmpeg_stages.streams import StreamType

__all__ = [
    "AtomicFilter",
    "Chain",
    "Filter",
    "FilterStage",
    "GlobalStage",
    "IncompleteCommand",
    "InvalidArgument",
    "Pipeline",
    "ReadStage",
    "StagesError",
    "StreamType",
    "ValidationResult",
    "WriteStage",
    "format_duration",
    "new",
]
