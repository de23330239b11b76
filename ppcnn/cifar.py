"""Readers for the CIFAR-10 binary batch files."""

from __future__ import annotations

from dataclasses import dataclass, field

from .utility import FileError

__all__ = [
    "DEFAULT_FOLDER",
    "RECORD_SIZE",
    "IMAGE_SIZE",
    "RECORDS_PER_FILE",
    "Cifar10Dataset",
    "read_cifar10_file",
    "read_cifar10_file_categorical",
    "read_training",
    "read_test",
    "read_training_categorical",
    "read_test_categorical",
    "read_dataset",
]

DEFAULT_FOLDER = "cifar-10/cifar-10-batches-bin"

IMAGE_SIZE = 3 * 32 * 32
RECORD_SIZE = 1 + IMAGE_SIZE
RECORDS_PER_FILE = 10000

_CLASS_COUNT = 10
_TRAINING_FILES = tuple(f"data_batch_{n}.bin" for n in range(1, 6))
_TEST_FILE = "test_batch.bin"


@dataclass
class Cifar10Dataset:
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


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise ValueError(f"limit must not be negative: {limit}")


def _record_count(limit: int, already_read: int) -> int:
    if limit > 0:
        return min(limit - already_read, RECORDS_PER_FILE)
    return RECORDS_PER_FILE


def _read_records(path: str, count: int) -> list[tuple[int, list[int]]]:
    try:
        with open(path, "rb") as stream:
            buffer = stream.read()
    except OSError as exc:
        raise FileError(f"Error opening file: {path}") from exc

    needed = count * RECORD_SIZE
    if len(buffer) < needed:
        raise ValueError(
            f"The file holds fewer than {count} records, probably corrupted ({path})"
        )
    return [
        (buffer[offset], list(buffer[offset + 1:offset + RECORD_SIZE]))
        for offset in range(0, needed, RECORD_SIZE)
    ]


def read_cifar10_file(
    path: str, limit: int = 0, already_read: int = 0
) -> tuple[list[list[int]], list[int]]:
    """Read images and labels from one batch file.

    limit is the total number of records wanted (0: no limit) and
    already_read how many were read before; nothing is read once the
    limit is reached.
    """
    _check_limit(limit)
    if limit and limit <= already_read:
        return [], []
    records = _read_records(path, _record_count(limit, already_read))
    images = [pixels for _, pixels in records]
    labels = [label for label, _ in records]
    return images, labels


def read_cifar10_file_categorical(
    path: str, limit: int = 0, start: int = 0
) -> tuple[list[list[int]], list[list[float]]]:
    """Read images and one-hot labels of ten classes from one batch file.

    start is the index the first record of this file takes in the whole set.
    """
    _check_limit(limit)
    if limit and limit <= start:
        return [], []
    records = _read_records(path, _record_count(limit, start))
    images = []
    labels = []
    for label, pixels in records:
        if label >= _CLASS_COUNT:
            raise ValueError(f"label out of range: {label}")
        one_hot = [0.0] * _CLASS_COUNT
        one_hot[label] = 1.0
        labels.append(one_hot)
        images.append(pixels)
    return images, labels


def read_training(
    folder: str = DEFAULT_FOLDER, limit: int = 0
) -> tuple[list[list[int]], list[int]]:
    """Read the five training batches (limit 0: no limit)."""
    images: list[list[int]] = []
    labels: list[int] = []
    for name in _TRAINING_FILES:
        batch_images, batch_labels = read_cifar10_file(
            f"{folder}/{name}", limit, len(images)
        )
        images.extend(batch_images)
        labels.extend(batch_labels)
    return images, labels


def read_test(
    folder: str = DEFAULT_FOLDER, limit: int = 0
) -> tuple[list[list[int]], list[int]]:
    """Read the test batch (limit 0: no limit)."""
    return read_cifar10_file(f"{folder}/{_TEST_FILE}", limit, 0)


def read_training_categorical(
    folder: str = DEFAULT_FOLDER, limit: int = 0
) -> tuple[list[list[int]], list[list[float]]]:
    """Read the five training batches with one-hot labels."""
    images: list[list[int]] = []
    labels: list[list[float]] = []
    for index, name in enumerate(_TRAINING_FILES):
        batch_images, batch_labels = read_cifar10_file_categorical(
            f"{folder}/{name}", limit, index * RECORDS_PER_FILE
        )
        images.extend(batch_images)
        labels.extend(batch_labels)
    return images, labels


def read_test_categorical(
    folder: str = DEFAULT_FOLDER, limit: int = 0
) -> tuple[list[list[int]], list[list[float]]]:
    """Read the test batch with one-hot labels."""
    return read_cifar10_file_categorical(f"{folder}/{_TEST_FILE}", limit, 0)


def read_dataset(
    folder: str = DEFAULT_FOLDER, training_limit: int = 0, test_limit: int = 0
) -> Cifar10Dataset:
    """Read the training and test sets from a folder (limits of 0: no limit)."""
    training_images, training_labels = read_training(folder, training_limit)
    test_images, test_labels = read_test(folder, test_limit)
    return Cifar10Dataset(
        training_images=training_images,
        test_images=test_images,
        training_labels=training_labels,
        test_labels=test_labels,
    )