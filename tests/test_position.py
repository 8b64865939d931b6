import math

import numpy as np
import pytest

from riskformer.config import InvalidDimensionError
from riskformer.position import PositionalEncoder


def test_positional_encoder_output_shape():
    encoder = PositionalEncoder(64, 100)
    out = encoder.forward(np.zeros((16 * 50, 64)))
    assert out.shape == (16 * 50, 64)


def test_encoding_shape_and_attributes():
    encoder = PositionalEncoder(64, 100)
    assert encoder.d_model == 64
    assert encoder.max_seq_len == 100
    assert encoder.encoding.shape == (100, 64)


def test_forward_adds_position_zero_encoding():
    encoder = PositionalEncoder(6, 10)
    out = encoder.forward(np.zeros((3, 6)))
    expected_row = np.array([0.0, 1.0, 0.0, 1.0, 0.0, 1.0])
    assert np.allclose(out, np.tile(expected_row, (3, 1)))


def test_forward_preserves_input_offsets():
    encoder = PositionalEncoder(4, 5)
    x = np.arange(8, dtype=np.float32).reshape(2, 4)
    out = encoder.forward(x)
    assert np.allclose(out - x, [[0.0, 1.0, 0.0, 1.0]] * 2)
    assert np.array_equal(x, np.arange(8, dtype=np.float32).reshape(2, 4))


def test_encoding_values_at_position_one():
    encoder = PositionalEncoder(4, 3)
    row = encoder.encoding[1]
    assert row[0] == pytest.approx(math.sin(1.0), abs=1e-6)
    assert row[1] == pytest.approx(math.cos(1.0), abs=1e-6)
    assert row[2] == pytest.approx(math.sin(1.0 / math.exp(0.5)), abs=1e-6)
    assert row[3] == pytest.approx(math.cos(1.0 / math.exp(0.5)), abs=1e-6)


def test_encoding_is_bounded():
    encoder = PositionalEncoder(32, 200)
    encoding = encoder.encoding
    assert encoding.shape == (200, 32)
    assert float(np.abs(encoding).max()) <= 1.0 + 1e-6
    assert float(encoding[0, 1]) == pytest.approx(1.0)


def test_forward_rejects_wrong_width():
    encoder = PositionalEncoder(8, 10)
    with pytest.raises(InvalidDimensionError, match="Expected d_model 8, got 4"):
        encoder.forward(np.zeros((2, 4)))


def test_forward_rejects_encoder_without_positions():
    encoder = PositionalEncoder(4, 0)
    with pytest.raises(InvalidDimensionError):
        encoder.forward(np.zeros((2, 4)))