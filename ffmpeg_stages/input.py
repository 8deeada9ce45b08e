"""Read stage: input declarations and the flags placed before each -i."""

import logging
import os
from typing import Optional, Union

from ffmpeg_stages.duration import (
    DURATION_FLAG,
    SEEK_FLAG,
    STOP_FLAG,
    DurationLike,
    generate_time_flags,
)
from ffmpeg_stages.filter_stage import FilterStage
from ffmpeg_stages.output import WriteStage
from ffmpeg_stages.state import CommandState

logger = logging.getLogger(__name__)


class ReadStage:
    """Operations scoped to the most recently declared input.

    Time flags added here are placed before that input's -i, so ffmpeg
    seeks the input quickly (keyframe based) rather than decoding up to
    the position.
    """

    def __init__(self, state: CommandState):
        self._state = state

    def ss(self, d: DurationLike) -> "ReadStage":
        """Start reading the current input at d."""
        self._state.current_input.options.extend(generate_time_flags(SEEK_FLAG, d))
        return self

    def to(self, d: DurationLike) -> "ReadStage":
        """Stop reading the current input at absolute position d."""
        self._state.current_input.options.extend(generate_time_flags(STOP_FLAG, d))
        return self

    def t(self, d: DurationLike) -> "ReadStage":
        """Read at most d of the current input."""
        self._state.current_input.options.extend(generate_time_flags(DURATION_FLAG, d))
        return self

    def input(self, path: str) -> "ReadStage":
        """Declare another input; later read flags apply to it."""
        self._state.add_input(path)
        logger.debug("[READ] Input #%d: %s", self._state.current_index, path)
        return self

    def filter(self) -> FilterStage:
        """Start attaching filters to the current input."""
        return FilterStage(self._state, self._state.current_index)

    def output(self, path: Optional[Union[str, os.PathLike]]) -> WriteStage:
        """Set the output path and move to the write stage."""
        return WriteStage(self._state).output(path)
