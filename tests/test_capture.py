"""
Tests for raw buffer loading.
"""

import numpy as np
import pytest
import soundfile as sf

from ircodec import (
    PulseRecorder,
    RC5Decoder,
    RC6Decoder,
    RC6Encoder,
    as_raw_buffer,
    durations_from_levels,
    load_levels_file,
    load_timings,
    parse_timings,
)


class TestAsRawBuffer:
    """Test buffer normalisation."""

    def test_list(self):
        raw = as_raw_buffer([5000, 889, 889])
        assert raw.dtype == np.uint32
        assert raw.tolist() == [5000, 889, 889]

    def test_whole_floats(self):
        assert as_raw_buffer([5000.0, 889.0]).tolist() == [5000, 889]

    def test_empty(self):
        assert len(as_raw_buffer([])) == 0

    def test_generator(self):
        assert as_raw_buffer(d for d in (1, 2, 3)).tolist() == [1, 2, 3]

    @pytest.mark.parametrize("bad", [
        [5000, -1],
        [5000, 889.5],
        [[1, 2], [3, 4]],
        ["a", "b"],
    ])
    def test_rejects_malformed(self, bad):
        with pytest.raises(ValueError):
            as_raw_buffer(bad)


class TestParseTimings:
    """Test text timings."""

    def test_signed_timings_get_gap(self):
        assert parse_timings("+889 -889 +1778").tolist() == [5000, 889, 889, 1778]

    def test_leading_space_is_gap(self):
        assert parse_timings("-20000 889 -889 889").tolist() == [20000, 889, 889, 889]

    def test_commas_and_comments(self):
        text = "# captured from remote\n889, 889,\n1778 # last\n"
        assert parse_timings(text, gap=100).tolist() == [100, 889, 889, 1778]

    def test_invalid_token(self):
        with pytest.raises(ValueError):
            parse_timings("889 abc")

    def test_empty(self):
        with pytest.raises(ValueError):
            parse_timings("# nothing here")

    def test_load_file(self, tmp_path):
        path = tmp_path / "capture.txt"
        path.write_text("+2666 -889 +444 -444 +444", encoding="utf-8")
        assert load_timings(path).tolist() == [5000, 2666, 889, 444, 444, 444]


class TestDurationsFromLevels:
    """Test envelope to duration conversion."""

    def test_inverse_of_to_levels(self):
        recorder = PulseRecorder(gap=3000)
        RC6Encoder(recorder).send(0xA5, 8)

        raw = durations_from_levels(recorder.to_levels(1_000_000), 1_000_000)

        assert raw.tolist() == recorder.raw.tolist()

    def test_no_leading_idle(self):
        levels = np.array([1, 1, 0, 0, 1], dtype=np.float32)
        assert durations_from_levels(levels, 1_000_000).tolist() == [0, 2, 2, 1]

    def test_silence(self):
        levels = np.zeros(100)
        assert durations_from_levels(levels, 1_000_000).tolist() == [100]

    def test_stereo_uses_first_channel(self):
        levels = np.array([[0, 1], [1, 0], [1, 0], [0, 1]])
        assert durations_from_levels(levels, 1_000_000).tolist() == [1, 2]

    def test_decodes_resampled_envelope(self):
        recorder = PulseRecorder()
        RC6Encoder(recorder).send(0xA5, 8)

        raw = durations_from_levels(recorder.to_levels(200_000), 200_000)

        assert RC6Decoder().decode(raw).value == 0xA5


class TestLoadLevelsFile:
    """Test reading envelope recordings."""

    def test_wav_round_trip(self, tmp_path):
        recorder = PulseRecorder()
        RC6Encoder(recorder).send(0x1234, 16)
        path = tmp_path / "rc6.wav"
        sf.write(str(path), recorder.to_levels(200_000), 200_000, subtype="PCM_16")

        result = RC6Decoder().decode(load_levels_file(path))

        assert result.bits == 16
        assert result.value == 0x1234

    def test_rc5_is_not_rc6(self, tmp_path):
        recorder = PulseRecorder()
        RC6Encoder(recorder).send(0x1234, 16)
        path = tmp_path / "rc6.wav"
        sf.write(str(path), recorder.to_levels(200_000), 200_000, subtype="PCM_16")

        assert RC5Decoder().decode(load_levels_file(path)) is None
