"""Global stage: the entry point and flags that precede every input."""

import logging
from typing import Optional

from ffmpeg_stages.config import get_settings
from ffmpeg_stages.input import ReadStage
from ffmpeg_stages.state import CommandState

logger = logging.getLogger(__name__)

OVERWRITE_FLAG = "-y"
HIDE_BANNER_FLAG = "-hide_banner"
LOGLEVEL_FLAG = "-loglevel"


class GlobalStage:
    """Operations legal before the first input is declared."""

    def __init__(self, state: CommandState):
        self._state = state

    def raw(self, value: str) -> "GlobalStage":
        """Append a raw token before the inputs."""
        self._state.global_args.append(str(value))
        return self

    def override(self) -> "GlobalStage":
        """Overwrite the output file without asking (-y)."""
        self._state.global_args.append(OVERWRITE_FLAG)
        return self

    def hide_banner(self) -> "GlobalStage":
        self._state.global_args.append(HIDE_BANNER_FLAG)
        return self

    def log_level(self, level: str) -> "GlobalStage":
        """Set ffmpeg's own log level, e.g. "error" or "warning"."""
        self._state.global_args.extend([LOGLEVEL_FLAG, str(level)])
        return self

    def input(self, path: str) -> ReadStage:
        """Declare the first input and move to the read stage."""
        return ReadStage(self._state).input(path)


def new(binary: Optional[str] = None) -> GlobalStage:
    """Start a new command.

    Args:
        binary: Invocation token; defaults to the configured ffmpeg binary.
    """
    if binary is None:
        binary = get_settings().ffmpeg_binary
    logger.debug("[GLOBAL] New command for %s", binary)
    return GlobalStage(CommandState(binary=binary))
