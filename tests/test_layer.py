import numpy as np
import pytest

from riskformer.config import InitializationError, InvalidDimensionError
from riskformer.layer import TransformerLayer


def _layer(seed=0, d_model=64, n_heads=8, d_ff=256):
    return TransformerLayer(d_model, n_heads, d_ff, 0.1, np.random.default_rng(seed))


def test_transformer_layer_shape():
    layer = _layer()
    output = layer.forward(np.zeros((16, 64), dtype=np.float32))
    assert output.shape == (16, 64)


def test_forward_of_zeros_is_zero():
    layer = _layer()
    output = layer.forward(np.zeros((4, 64), dtype=np.float32))
    assert np.allclose(output, 0.0)


def test_layer_norm_statistics():
    layer = _layer()
    rng = np.random.default_rng(42)
    data = rng.normal(0.0, 1.0, size=(10, 64)).astype(np.float32)
    normalized = layer.layer_norm(data)
    assert normalized.shape == data.shape
    means = normalized.mean(axis=1)
    variances = (normalized ** 2).mean(axis=1) - means ** 2
    assert abs(means.mean()) < 0.1
    assert abs(variances.mean() - 1.0) < 0.5


def test_layer_norm_constant_row_is_zero():
    layer = _layer()
    normalized = layer.layer_norm(np.full((3, 64), 7.0, dtype=np.float32))
    assert np.allclose(normalized, 0.0)


def test_layer_norm_wrong_width_raises():
    layer = _layer()
    with pytest.raises(InvalidDimensionError):
        layer.layer_norm(np.ones((2, 32), dtype=np.float32))


def test_forward_wrong_width_raises():
    layer = _layer()
    with pytest.raises(InvalidDimensionError):
        layer.forward(np.ones((2, 65), dtype=np.float32))


def test_initial_norm_parameters():
    layer = _layer()
    assert np.array_equal(layer.norm1_scale, np.ones(64))
    assert np.array_equal(layer.norm1_bias, np.zeros(64))
    assert np.array_equal(layer.norm2_scale, np.ones(64))
    assert np.array_equal(layer.norm2_bias, np.zeros(64))


def test_weight_shapes():
    layer = _layer(d_model=16, n_heads=4, d_ff=32)
    assert layer.w1.shape == (16, 32)
    assert layer.w2.shape == (32, 16)
    assert layer.attention.d_model == 16


def test_feed_forward_with_identity_weights_is_relu():
    layer = _layer(d_model=4, n_heads=2, d_ff=4)
    layer.w1 = np.eye(4, dtype=np.float32)
    layer.w2 = np.eye(4, dtype=np.float32)
    x = np.array([[1.0, -2.0, 3.0, -4.0]], dtype=np.float32)
    assert np.array_equal(layer.feed_forward(x), [[1.0, 0.0, 3.0, 0.0]])


def test_same_seed_gives_same_output():
    data = np.random.default_rng(3).normal(size=(5, 64)).astype(np.float32)
    first = _layer(seed=9).forward(data)
    second = _layer(seed=9).forward(data)
    assert np.array_equal(first, second)


def test_zero_d_ff_raises():
    with pytest.raises(InitializationError):
        TransformerLayer(8, 2, 0, 0.1)