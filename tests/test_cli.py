"""
Tests for the command-line tools.
"""

import pytest
from click.testing import CliRunner

from ircodec.cli import decode, encode


@pytest.fixture
def runner():
    return CliRunner()


class TestEncodeCLI:
    """Test ircodec-encode."""

    def test_prints_timings(self, runner):
        result = runner.invoke(encode.main, ["rc5", "0x1F", "-n", "12"])

        assert result.exit_code == 0
        assert result.output.startswith("+889 -889 +1778 -889")

    def test_default_nbits(self, runner):
        result = runner.invoke(encode.main, ["RC6", "0", "-v"])

        assert result.exit_code == 0
        assert "nbits=20" in result.output
        assert "Carrier: 36 kHz" in result.output

    def test_bad_value(self, runner):
        result = runner.invoke(encode.main, ["rc5", "zz"])
        assert result.exit_code == 1

    def test_bad_nbits(self, runner):
        result = runner.invoke(encode.main, ["rc5", "1", "-n", "0"])
        assert result.exit_code == 1

    def test_unknown_protocol(self, runner):
        result = runner.invoke(encode.main, ["nec", "1"])
        assert result.exit_code != 0


class TestDecodeCLI:
    """Test ircodec-decode."""

    def test_decode_arguments(self, runner):
        timings = runner.invoke(encode.main, ["rc5", "0x1F", "-n", "12"]).output.split()

        result = runner.invoke(decode.main, ["--"] + timings)

        assert result.exit_code == 0
        assert "RC5 12 bits 0x01F" in result.output

    def test_decode_falls_back_to_rc6(self, runner, tmp_path):
        timings = runner.invoke(encode.main, ["rc6", "0xA5", "-n", "8"]).output
        path = tmp_path / "capture.txt"
        path.write_text(timings, encoding="utf-8")

        result = runner.invoke(decode.main, ["-i", str(path)])

        assert result.exit_code == 0
        assert "RC6 8 bits 0xA5" in result.output

    def test_decode_wav(self, runner, tmp_path):
        path = tmp_path / "rc6.wav"
        encoded = runner.invoke(encode.main, ["rc6", "0xBEEF", "-n", "16", "-o", str(path)])
        assert encoded.exit_code == 0
        assert path.exists()

        result = runner.invoke(decode.main, ["-i", str(path)])

        assert result.exit_code == 0
        assert "RC6 16 bits 0xBEEF" in result.output

    def test_nothing_decoded(self, runner):
        result = runner.invoke(decode.main, ["-v", "--", "+100", "-100", "+100"])

        assert result.exit_code == 1
        assert "No RC5/RC6 message decoded" in result.output

    def test_no_input(self, runner):
        result = runner.invoke(decode.main, [])
        assert result.exit_code == 1

    def test_bad_timings(self, runner):
        result = runner.invoke(decode.main, ["--", "889", "oops"])
        assert result.exit_code == 1

    def test_raw_suffix_read_as_timings(self, runner, tmp_path):
        path = tmp_path / "capture.raw"
        path.write_text("+889 -889 +1778", encoding="utf-8")

        result = runner.invoke(decode.main, ["-i", str(path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "No RC5/RC6 message decoded" in result.output

    def test_raw_suffix_decodes(self, runner, tmp_path):
        timings = runner.invoke(encode.main, ["rc5", "0x1F", "-n", "12"]).output
        path = tmp_path / "capture.raw"
        path.write_text(timings, encoding="utf-8")

        result = runner.invoke(decode.main, ["-i", str(path)])

        assert result.exit_code == 0
        assert "RC5 12 bits 0x01F" in result.output
