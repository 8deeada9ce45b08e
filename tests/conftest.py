"""
Pytest configuration and shared fixtures for ffmpeg_stages tests.
"""
import logging
import os
import sys
from pathlib import Path

import pytest

# Add repository root to Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

# Keep the invocation token stable regardless of the developer's environment
os.environ.pop("FFMPEG_STAGES_FFMPEG_BINARY", None)
os.environ.pop("FFMPEG_STAGES_LOG_LEVEL", None)

from ffmpeg_stages import new  # noqa: E402
from ffmpeg_stages.config import clear_settings_cache  # noqa: E402
from ffmpeg_stages.state import CommandState  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop cached settings so env changes made by a test do not leak."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def restore_log_record_factory():
    """Undo any record factory a test installs."""
    original = logging.getLogRecordFactory()
    yield
    logging.setLogRecordFactory(original)


@pytest.fixture
def builder():
    """A fresh GlobalStage invoking plain 'ffmpeg'."""
    return new(binary="ffmpeg")


@pytest.fixture
def empty_state():
    """A CommandState with nothing declared."""
    return CommandState()
