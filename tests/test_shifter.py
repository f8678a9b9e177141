"""
Tests for sampler/shifter.py — librosa pitch-shift boundary.

librosa is injected as a MagicMock; the tests check what is passed to
librosa and that the output length always matches the input.
"""

from unittest.mock import MagicMock

import numpy as np
import pytest

from core.audio.base import PitchShifter
from sampler.shifter import LibrosaPitchShifter


def _make_mock_librosa(output_len: int | None = None) -> MagicMock:
    """Mock librosa whose pitch_shift returns ``output_len`` samples of 0.5."""
    mock = MagicMock()

    def pitch_shift(y, sr, n_steps, bins_per_octave, res_type):
        size = len(y) if output_len is None else output_len
        return np.full(size, 0.5, dtype=np.float32)

    def fix_length(data, size):
        if len(data) >= size:
            return data[:size]
        return np.pad(data, (0, size - len(data)))

    mock.effects.pitch_shift.side_effect = pitch_shift
    mock.util.fix_length.side_effect = fix_length
    return mock


class TestLibrosaPitchShifter:
    def test_satisfies_protocol(self):
        assert isinstance(LibrosaPitchShifter(librosa=MagicMock()), PitchShifter)

    def test_zero_shift_skips_librosa(self):
        mock_lib = _make_mock_librosa()
        y = np.array([0.1, -0.2, 0.3], dtype=np.float32)
        out = LibrosaPitchShifter(librosa=mock_lib).shift(y, 44100, 0)
        np.testing.assert_array_equal(out, y)
        assert out is not y
        mock_lib.effects.pitch_shift.assert_not_called()

    def test_empty_buffer_skips_librosa(self):
        mock_lib = _make_mock_librosa()
        out = LibrosaPitchShifter(librosa=mock_lib).shift(np.zeros(0, dtype=np.float32), 44100, 3)
        assert out.size == 0
        mock_lib.effects.pitch_shift.assert_not_called()

    def test_passes_parameters(self):
        mock_lib = _make_mock_librosa()
        y = np.zeros(16, dtype=np.float32)
        LibrosaPitchShifter(librosa=mock_lib).shift(y, 48000, -2)
        _, kwargs = mock_lib.effects.pitch_shift.call_args
        assert kwargs["sr"] == 48000
        assert kwargs["n_steps"] == -2.0
        assert kwargs["bins_per_octave"] == 12
        assert kwargs["res_type"] == "soxr_hq"

    def test_custom_resampler(self):
        mock_lib = _make_mock_librosa()
        shifter = LibrosaPitchShifter(librosa=mock_lib, res_type="kaiser_fast")
        shifter.shift(np.zeros(8, dtype=np.float32), 22050, 1)
        _, kwargs = mock_lib.effects.pitch_shift.call_args
        assert kwargs["res_type"] == "kaiser_fast"

    @pytest.mark.parametrize("output_len", [10, 16, 20])
    def test_output_length_matches_input(self, output_len):
        mock_lib = _make_mock_librosa(output_len=output_len)
        out = LibrosaPitchShifter(librosa=mock_lib).shift(np.zeros(16, dtype=np.float32), 44100, 5)
        assert out.shape == (16,)
        assert out.dtype == np.float32

    def test_returns_shifted_data(self):
        mock_lib = _make_mock_librosa()
        out = LibrosaPitchShifter(librosa=mock_lib).shift(np.zeros(4, dtype=np.float32), 44100, 1)
        np.testing.assert_allclose(out, [0.5, 0.5, 0.5, 0.5])
