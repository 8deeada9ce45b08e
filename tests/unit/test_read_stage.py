"""
Unit tests for the global and read stages.

Tests pre-input flags, input declaration and the placement of read-side
time flags before their own input's -i.
"""
from datetime import timedelta

import pytest

from ffmpeg_stages import new
from ffmpeg_stages.common import InvalidArgument
from ffmpeg_stages.filter_stage import FilterStage
from ffmpeg_stages.global_stage import GlobalStage
from ffmpeg_stages.input import ReadStage
from ffmpeg_stages.output import WriteStage

from tests.fixtures.ffmpeg_factories import seconds


class TestGlobalStage:
    """Tests for flags that precede every input."""

    def test_new_returns_global_stage(self):
        assert isinstance(new(), GlobalStage)

    def test_override(self, builder):
        cmd = builder.override().input("in.mkv").output("out.mkv").build()
        assert cmd == "ffmpeg -y -i in.mkv out.mkv"

    def test_raw_tokens_keep_order(self, builder):
        cmd = (
            builder.raw("-nostdin").raw("-threads").raw("4")
            .input("in.mkv").output("out.mkv").build()
        )
        assert cmd == "ffmpeg -nostdin -threads 4 -i in.mkv out.mkv"

    def test_hide_banner_and_log_level(self, builder):
        cmd = (
            builder.hide_banner().log_level("error").override()
            .input("in.mkv").output("out.mkv").build()
        )
        assert cmd == "ffmpeg -hide_banner -loglevel error -y -i in.mkv out.mkv"

    def test_input_transitions_to_read(self, builder):
        assert isinstance(builder.input("in.mkv"), ReadStage)

    def test_explicit_binary(self):
        cmd = new(binary="/opt/ffmpeg/bin/ffmpeg").input("a").output("b").build()
        assert cmd == "/opt/ffmpeg/bin/ffmpeg -i a b"

    def test_default_binary_comes_from_settings(self, monkeypatch):
        monkeypatch.setenv("FFMPEG_STAGES_FFMPEG_BINARY", "ffmpeg7")
        assert new().input("a").output("b").build() == "ffmpeg7 -i a b"

    def test_sessions_do_not_share_state(self):
        first = new().override()
        second = new()

        first.input("a.mkv").output("a.mp4")
        assert second.input("b.mkv").output("b.mp4").build() == "ffmpeg -i b.mkv b.mp4"


class TestReadStage:
    """Tests for input-side flags."""

    def test_duration_before_input(self, builder):
        cmd = builder.input("movie.mkv").t(seconds(30)).output("out.mkv").build()
        assert cmd == "ffmpeg -t 00:00:30.000 -i movie.mkv out.mkv"

    def test_override_then_duration(self, builder):
        cmd = builder.override().input("movie.mkv").t(seconds(30)).output("out.mkv").build()

        tokens = cmd.split()
        assert cmd == "ffmpeg -y -t 00:00:30.000 -i movie.mkv out.mkv"
        assert tokens.index("-t") < tokens.index("-i")

    def test_seek_flags_keep_call_order(self, builder):
        cmd = (
            builder.input("movie.mkv")
            .ss(seconds(10)).to(seconds(70))
            .output("out.mkv").build()
        )
        assert cmd == "ffmpeg -ss 00:00:10.000 -to 00:01:10.000 -i movie.mkv out.mkv"

    def test_flags_scope_to_latest_input(self, builder):
        cmd = (
            builder.input("movie.mkv").ss(seconds(5))
            .input("audio.mp3").t(seconds(20))
            .output("out.mkv").build()
        )
        assert cmd == (
            "ffmpeg -ss 00:00:05.000 -i movie.mkv "
            "-t 00:00:20.000 -i audio.mp3 out.mkv"
        )

    def test_multiple_inputs_then_codecs(self, builder):
        cmd = (
            builder.override()
            .input("movie.mkv")
            .input("audio.mp3")
            .output("out.mkv")
            .video_codec("libx264")
            .audio_codec("aac")
            .subtitle_codec("srt")
            .build()
        )

        assert cmd == "ffmpeg -y -i movie.mkv -i audio.mp3 -c:v libx264 -c:a aac -c:s srt out.mkv"
        tokens = cmd.split()
        last_input = max(i for i, tok in enumerate(tokens) if tok == "-i")
        assert all(tokens.index(flag) > last_input for flag in ("-c:v", "-c:a", "-c:s"))

    def test_filter_transitions_to_filter_stage(self, builder):
        assert isinstance(builder.input("in.mkv").filter(), FilterStage)

    def test_output_transitions_to_write_stage(self, builder):
        assert isinstance(builder.input("in.mkv").output("out.mkv"), WriteStage)

    def test_rejects_negative_duration(self, builder):
        read = builder.input("in.mkv")
        with pytest.raises(InvalidArgument):
            read.ss(timedelta(seconds=-1))

    def test_numeric_seconds(self, builder):
        cmd = builder.input("in.mkv").ss(1.25).output("out.mkv").build()
        assert cmd == "ffmpeg -ss 00:00:01.250 -i in.mkv out.mkv"
