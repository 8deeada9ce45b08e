"""Build-time validation of an accumulated command."""

from typing import List, Optional

from ffmpeg_stages.common import ValidationResult
from ffmpeg_stages.state import CommandState
from ffmpeg_stages.streams import COPY_CODEC, StreamType, codec_flag


def _last_value(args: List[str], flag: str) -> Optional[str]:
    """Return the value following the last occurrence of flag, if any."""
    value = None
    for i, token in enumerate(args[:-1]):
        if token == flag:
            value = args[i + 1]
    return value


def validate_state(state: CommandState) -> ValidationResult:
    """Validate a command state before serialization.

    Errors mark a command that cannot be built; warnings are for
    combinations the tool accepts but that are probably not intended.
    """
    result = ValidationResult()

    # --- Inputs ---
    if not state.inputs:
        result.add_error("At least one input is required")
    for i, spec in enumerate(state.inputs):
        if not spec.path:
            result.add_warning(f"Input #{i} has an empty path")

    # --- Output ---
    if not state.output:
        result.add_error("Output path is required")
    elif any(spec.path == state.output for spec in state.inputs):
        result.add_warning(
            f"Output path '{state.output}' is also declared as an input"
        )

    # --- Filters with copy ---
    video_codec = _last_value(state.write_args, codec_flag(StreamType.VIDEO))
    if video_codec == COPY_CODEC and state.filters:
        result.add_warning(
            "Video filters will be ignored when video codec is set to 'copy'"
        )

    return result
