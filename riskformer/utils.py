"""Weight initialisation and scaled dot-product attention helpers."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .config import InvalidDimensionError, ModelError


def xavier_init(
    shape: Sequence[int], rng: np.random.Generator | None = None
) -> np.ndarray:
    """Return a 2-D float32 array drawn from N(0, sqrt(6 / (n_in + n_out)))."""
    if len(shape) != 2:
        raise InvalidDimensionError(f"Expected a 2-D shape, got {tuple(shape)}")
    n_in, n_out = (int(dim) for dim in shape)
    total = n_in + n_out
    limit = math.sqrt(6.0 / total) if total > 0 else math.inf
    if not math.isfinite(limit):
        raise ModelError(f"Invalid standard deviation for shape {tuple(shape)}")
    rng = rng if rng is not None else np.random.default_rng()
    return rng.normal(0.0, limit, size=(n_in, n_out)).astype(np.float32)


def compute_attention(
    query: np.ndarray, key: np.ndarray, value: np.ndarray, d_k: float
) -> np.ndarray:
    """Softmax attention over arrays of shape (batch, heads, seq, dim).

    Scores use the first ``int(d_k)`` components of query and key and are
    scaled by ``sqrt(d_k)``.
    """
    query = np.asarray(query, dtype=np.float32)
    key = np.asarray(key, dtype=np.float32)
    value = np.asarray(value, dtype=np.float32)
    for name, arr in (("query", query), ("key", key), ("value", value)):
        if arr.ndim != 4:
            raise InvalidDimensionError(f"{name} must be 4-D, got {arr.ndim}-D")

    batch, heads, seq_len = query.shape[:3]
    if key.shape[:3] != (batch, heads, seq_len) or value.shape[:3] != (
        batch,
        heads,
        seq_len,
    ):
        raise InvalidDimensionError(
            f"Mismatched shapes: query {query.shape}, key {key.shape}, "
            f"value {value.shape}"
        )

    k = max(int(d_k), 0)
    if k > query.shape[3] or k > key.shape[3]:
        raise InvalidDimensionError(
            f"d_k {k} exceeds key/query depth {min(query.shape[3], key.shape[3])}"
        )

    with np.errstate(invalid="ignore", divide="ignore"):
        scale = np.float32(math.sqrt(d_k)) if d_k >= 0 else np.float32(np.nan)
        scores = (query[..., :k] @ np.swapaxes(key[..., :k], -1, -2)) / scale
        max_val = np.max(scores, axis=-1, keepdims=True, initial=-np.inf)
        weights = np.exp(scores - max_val)
        weights /= weights.sum(axis=-1, keepdims=True)
    return (weights @ value).astype(np.float32)