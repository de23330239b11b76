"""Readers for the MNIST IDX image and label files."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from .utility import FileError

__all__ = [
    "IMAGE_MAGIC",
    "LABEL_MAGIC",
    "MnistDataset",
    "read_header",
    "read_mnist_file",
    "read_mnist_image_file",
    "read_mnist_label_file",
    "read_mnist_label_file_categorical",
    "read_training_images",
    "read_test_images",
    "read_training_labels",
    "read_test_labels",
    "read_dataset",
]

IMAGE_MAGIC = 0x803
LABEL_MAGIC = 0x801

_IMAGE_HEADER_SIZE = 16
_LABEL_HEADER_SIZE = 8
_CLASS_COUNT = 10
_WORD = struct.Struct(">I")

_TRAINING_IMAGES = "train-images-idx3-ubyte"
_TEST_IMAGES = "t10k-images-idx3-ubyte"
_TRAINING_LABELS = "train-labels-idx1-ubyte"
_TEST_LABELS = "t10k-labels-idx1-ubyte"


@dataclass
class MnistDataset:
    """Training and test images with their labels."""

    training_images: list[list[int]] = field(default_factory=list)
    test_images: list[list[int]] = field(default_factory=list)
    training_labels: list[int] = field(default_factory=list)
    test_labels: list[int] = field(default_factory=list)

    def resize_training(self, new_size: int) -> None:
        """Shrink the training set to new_size; a larger size has no effect."""
        if len(self.training_images) > new_size:
            del self.training_images[new_size:]
            del self.training_labels[new_size:]

    def resize_test(self, new_size: int) -> None:
        """Shrink the test set to new_size; a larger size has no effect."""
        if len(self.test_images) > new_size:
            del self.test_images[new_size:]
            del self.test_labels[new_size:]


def read_header(buffer: bytes, position: int) -> int:
    """Return the big-endian 32-bit header word at the given word position."""
    if position < 0:
        raise ValueError(f"header position must not be negative: {position}")
    try:
        (value,) = _WORD.unpack_from(buffer, position * _WORD.size)
    except struct.error:
        raise ValueError(
            f"buffer too short for header word {position}"
        ) from None
    return value


def read_mnist_file(path: str, key: int) -> bytes:
    """Read a whole MNIST file and check its magic number and size."""
    try:
        with open(path, "rb") as stream:
            buffer = stream.read()
    except OSError as exc:
        raise FileError(f"Error opening file: {path}") from exc

    magic = read_header(buffer, 0)
    if magic != key:
        raise ValueError(
            f"Invalid magic number, probably not a MNIST file ({path})"
        )

    count = read_header(buffer, 1)
    if magic == IMAGE_MAGIC:
        rows = read_header(buffer, 2)
        columns = read_header(buffer, 3)
        needed = count * rows * columns + _IMAGE_HEADER_SIZE
    elif magic == LABEL_MAGIC:
        needed = count + _LABEL_HEADER_SIZE
    else:
        needed = 0
    if len(buffer) < needed:
        raise ValueError(
            "The file is not large enough to hold all the data, "
            f"probably corrupted ({path})"
        )
    return buffer


def _bounded_count(count: int, limit: int, start: int) -> int:
    if start < 0:
        raise ValueError(f"start must not be negative: {start}")
    if limit > 0 and count > limit:
        count = limit
    return max(0, min(count, read_count_available(count, start)))


def read_count_available(count: int, start: int) -> int:
    return count if start == 0 else count


def read_mnist_image_file(
    path: str, limit: int = 0, start: int = 0
) -> list[list[int]]:
    """Return the images of an image file as flat lists of pixel values.

    limit caps the number of images (0: no limit); start skips that many
    images at the beginning of the file.
    """
    buffer = read_mnist_file(path, IMAGE_MAGIC)
    total = read_header(buffer, 1)
    pixels = read_header(buffer, 2) * read_header(buffer, 3)

    count = total if limit <= 0 or total <= limit else limit
    if start < 0:
        raise ValueError(f"start must not be negative: {start}")
    count = max(0, min(count, total - start))

    first = _IMAGE_HEADER_SIZE + start * pixels
    return [
        list(buffer[offset:offset + pixels])
        for offset in range(first, first + count * pixels, pixels)
    ] if pixels else [[] for _ in range(count)]


def _label_bytes(path: str, limit: int, start: int) -> bytes:
    buffer = read_mnist_file(path, LABEL_MAGIC)
    total = read_header(buffer, 1)

    count = total if limit <= 0 or total <= limit else limit
    if start < 0:
        raise ValueError(f"start must not be negative: {start}")
    count = max(0, min(count, total - start))

    first = _LABEL_HEADER_SIZE + start
    return buffer[first:first + count]


def read_mnist_label_file(path: str, limit: int = 0, start: int = 0) -> list[int]:
    """Return the labels of a label file.

    limit caps the number of labels (0: no limit); start skips that many
    labels at the beginning of the file.
    """
    return list(_label_bytes(path, limit, start))


def read_mnist_label_file_categorical(
    path: str, limit: int = 0, start: int = 0
) -> list[list[int]]:
    """Return the labels of a label file as one-hot lists of ten classes."""
    rows = []
    for label in _label_bytes(path, limit, start):
        if label >= _CLASS_COUNT:
            raise ValueError(f"label out of range: {label}")
        row = [0] * _CLASS_COUNT
        row[label] = 1
        rows.append(row)
    return rows


def read_training_images(folder: str, limit: int = 0) -> list[list[int]]:
    return read_mnist_image_file(f"{folder}/{_TRAINING_IMAGES}", limit)


def read_test_images(folder: str, limit: int = 0) -> list[list[int]]:
    return read_mnist_image_file(f"{folder}/{_TEST_IMAGES}", limit)


def read_training_labels(folder: str, limit: int = 0) -> list[int]:
    return read_mnist_label_file(f"{folder}/{_TRAINING_LABELS}", limit)


def read_test_labels(folder: str, limit: int = 0) -> list[int]:
    return read_mnist_label_file(f"{folder}/{_TEST_LABELS}", limit)


def read_dataset(
    folder: str = "mnist", training_limit: int = 0, test_limit: int = 0
) -> MnistDataset:
    """Read the training and test sets from a folder (limits of 0: no limit)."""
    return MnistDataset(
        training_images=read_training_images(folder, training_limit),
        test_images=read_test_images(folder, test_limit),
        training_labels=read_training_labels(folder, training_limit),
        test_labels=read_test_labels(folder, test_limit),
    )