"""Binarisation and per-image normalisation of image collections."""

from __future__ import annotations

import math
from typing import Any, MutableSequence, Sequence

__all__ = [
    "DEFAULT_THRESHOLD",
    "binarize_each",
    "mean",
    "stddev",
    "normalize_each",
    "binarize_dataset",
    "normalize_dataset",
]

DEFAULT_THRESHOLD = 30.0


def binarize_each(
    values: Sequence[MutableSequence[float]], threshold: float = DEFAULT_THRESHOLD
) -> None:
    """Replace, in place, every value above threshold by 1.0 and the rest by 0.0."""
    for vec in values:
        vec[:] = [1.0 if v > threshold else 0.0 for v in vec]


def mean(values: Sequence[float]) -> float:
    """Return the arithmetic mean of the values."""
    if not values:
        raise ValueError("mean of an empty sequence")
    return math.fsum(values) / len(values)


def stddev(values: Sequence[float], mean: float) -> float:
    """Return the standard deviation of the values around the given mean."""
    if not values:
        raise ValueError("standard deviation of an empty sequence")
    return math.sqrt(math.fsum((v - mean) ** 2 for v in values) / len(values))


def normalize_each(values: Sequence[MutableSequence[float]]) -> None:
    """Shift each sequence to zero mean and scale it to unit variance, in place.

    A sequence whose values are all equal raises ZeroDivisionError.
    """
    for vec in values:
        centre = mean(vec)
        vec[:] = [v - centre for v in vec]
        spread = stddev(vec, 0.0)
        vec[:] = [v / spread for v in vec]


def binarize_dataset(dataset: Any) -> None:
    """Binarise the training and test images of a dataset in place."""
    binarize_each(dataset.training_images)
    binarize_each(dataset.test_images)


def normalize_dataset(dataset: Any) -> None:
    """Normalise the training and test images of a dataset in place."""
    normalize_each(dataset.training_images)
    normalize_each(dataset.test_images)