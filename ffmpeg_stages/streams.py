"""Stream specifiers and per-stream codec flag generation."""

from enum import Enum
from typing import List, Optional, Union

from ffmpeg_stages.common import InvalidArgument


class StreamType(str, Enum):
    """Stream type codes used in ffmpeg stream specifiers."""

    VIDEO = "v"
    AUDIO = "a"
    SUBTITLE = "s"
    DATA = "d"
    ATTACHMENT = "t"


# Long names accepted wherever a StreamType is expected
STREAM_TYPE_CODES = {
    "video": StreamType.VIDEO,
    "audio": StreamType.AUDIO,
    "subtitle": StreamType.SUBTITLE,
    "data": StreamType.DATA,
    "attachment": StreamType.ATTACHMENT,
}

COPY_CODEC = "copy"


def stream_code(stream: Union[StreamType, str]) -> str:
    """Return the short specifier code for a stream type or raw specifier."""
    if isinstance(stream, StreamType):
        return stream.value
    if not isinstance(stream, str) or not stream:
        raise InvalidArgument(f"Invalid stream specifier {stream!r}")
    known = STREAM_TYPE_CODES.get(stream.lower())
    # Anything else (e.g. "V", "m:language:eng") is passed through untouched
    return known.value if known else stream


def codec_flag(stream: Union[StreamType, str], index: Optional[int] = None) -> str:
    """Build a codec flag such as -c:v or -c:a:1."""
    code = stream_code(stream)
    if index is None:
        return f"-c:{code}"
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        raise InvalidArgument(f"Stream index must be a non-negative integer, got {index!r}")
    return f"-c:{code}:{index}"


def generate_codec_flags(
    stream: Union[StreamType, str],
    codec: str,
    index: Optional[int] = None,
) -> List[str]:
    """Generate the flag/value pair selecting a codec for a stream."""
    return [codec_flag(stream, index), codec]
