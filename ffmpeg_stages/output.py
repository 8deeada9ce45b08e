"""Write stage: output-side flags, output path and the terminal build step."""

import logging
import os
from typing import List, Optional, Union

from ffmpeg_stages.command_generator import build_args, build_command
from ffmpeg_stages.common import InvalidArgument, ValidationResult
from ffmpeg_stages.duration import (
    DURATION_FLAG,
    SEEK_FLAG,
    STOP_FLAG,
    DurationLike,
    generate_time_flags,
)
from ffmpeg_stages.state import CommandState
from ffmpeg_stages.streams import COPY_CODEC, StreamType, generate_codec_flags
from ffmpeg_stages.validation import validate_state

logger = logging.getLogger(__name__)

CRF_FLAG = "-crf"


class WriteStage:
    """Operations legal once every input has been declared.

    Time flags added here land after all inputs, which makes ffmpeg seek
    precisely by decoding instead of jumping to the nearest keyframe.
    """

    def __init__(self, state: CommandState):
        self._state = state

    def _append(self, args: List[str]) -> "WriteStage":
        self._state.write_args.extend(args)
        return self

    # -- time -------------------------------------------------------------

    def ss(self, d: DurationLike) -> "WriteStage":
        """Start the output at d (-ss after the inputs)."""
        return self._append(generate_time_flags(SEEK_FLAG, d))

    def to(self, d: DurationLike) -> "WriteStage":
        """Stop the output at absolute position d (-to after the inputs)."""
        return self._append(generate_time_flags(STOP_FLAG, d))

    def t(self, d: DurationLike) -> "WriteStage":
        """Limit the output duration to d (-t after the inputs)."""
        return self._append(generate_time_flags(DURATION_FLAG, d))

    # -- codecs -----------------------------------------------------------

    def video_codec(self, codec: str) -> "WriteStage":
        return self._append(generate_codec_flags(StreamType.VIDEO, codec))

    def audio_codec(self, codec: str) -> "WriteStage":
        return self._append(generate_codec_flags(StreamType.AUDIO, codec))

    def subtitle_codec(self, codec: str) -> "WriteStage":
        return self._append(generate_codec_flags(StreamType.SUBTITLE, codec))

    def codec_for(self, stream: Union[StreamType, str], index: int, codec: str) -> "WriteStage":
        """Set the codec of one output stream, e.g. -c:a:1 libopus."""
        return self._append(generate_codec_flags(stream, codec, index=index))

    def copy_video(self) -> "WriteStage":
        """Copy the video stream without re-encoding."""
        return self.video_codec(COPY_CODEC)

    def copy_audio(self) -> "WriteStage":
        """Copy the audio stream without re-encoding."""
        return self.audio_codec(COPY_CODEC)

    def crf(self, value: int) -> "WriteStage":
        """Set the constant rate factor for the video encoder."""
        return self._append([CRF_FLAG, str(value)])

    # -- output -----------------------------------------------------------

    def output(self, path: Optional[Union[str, os.PathLike]]) -> "WriteStage":
        """Set the output path. Calling it again replaces the previous path."""
        if self._state.output is not None:
            logger.debug("[WRITE] Replacing output %s with %s", self._state.output, path)
        if path is not None and not isinstance(path, (str, os.PathLike)):
            raise InvalidArgument(f"Output path must be a str or PathLike, got {type(path).__name__}")
        self._state.output = path if path is None else os.fspath(path)
        return self

    def validate(self) -> ValidationResult:
        """Report what build() would reject, plus non-blocking warnings."""
        return validate_state(self._state)

    def build_args(self) -> List[str]:
        """Assemble the command as an argument list."""
        return build_args(self._state)

    def build(self) -> str:
        """Assemble the command as a single space-separated string.

        Raises:
            IncompleteCommand: When no input was declared or no output set.
        """
        return build_command(self._state)
