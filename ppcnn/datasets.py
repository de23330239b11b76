"""Loading of normalised MNIST and CIFAR-10 test sets."""

from __future__ import annotations

from typing import MutableSequence, Sequence

from . import cifar, mnist

__all__ = [
    "MNIST_DATASET_PATH",
    "CIFAR10_DATASET_PATH",
    "NORMALIZE_DENOM",
    "normalize",
    "load_mnist_test_images",
    "load_mnist_test_labels",
    "load_cifar10_test_images",
    "load_cifar10_test_labels",
]

MNIST_DATASET_PATH = "../datasets/mnist"
CIFAR10_DATASET_PATH = "../datasets/cifar-10"

NORMALIZE_DENOM = 255


def normalize(images: Sequence[MutableSequence[float]]) -> None:
    """Divide every pixel by 255 in place, mapping bytes onto [0, 1]."""
    for image in images:
        image[:] = [pixel / NORMALIZE_DENOM for pixel in image]


def _as_normalized_floats(images: list[list[int]]) -> list[list[float]]:
    result: list[list[float]] = [[float(p) for p in image] for image in images]
    normalize(result)
    return result


def load_mnist_test_images(
    dataset_dir: str = MNIST_DATASET_PATH, test_limit: int = 0
) -> list[list[float]]:
    """Return the MNIST test images scaled to [0, 1] (limit 0: no limit)."""
    return _as_normalized_floats(mnist.read_test_images(dataset_dir, test_limit))


def load_mnist_test_labels(
    dataset_dir: str = MNIST_DATASET_PATH, test_limit: int = 0
) -> list[int]:
    """Return the MNIST test labels (limit 0: no limit)."""
    return mnist.read_test_labels(dataset_dir, test_limit)


def load_cifar10_test_images(
    dataset_dir: str = CIFAR10_DATASET_PATH, test_limit: int = 0
) -> list[list[float]]:
    """Return the CIFAR-10 test images scaled to [0, 1] (limit 0: no limit)."""
    images, _ = cifar.read_test(dataset_dir, test_limit)
    return _as_normalized_floats(images)


def load_cifar10_test_labels(
    dataset_dir: str = CIFAR10_DATASET_PATH, test_limit: int = 0
) -> list[int]:
    """Return the CIFAR-10 test labels (limit 0: no limit)."""
    _, labels = cifar.read_test(dataset_dir, test_limit)
    return labels