import struct

import pytest

from ppcnn.cifar import IMAGE_SIZE
from ppcnn.datasets import (
    NORMALIZE_DENOM,
    load_cifar10_test_images,
    load_cifar10_test_labels,
    load_mnist_test_images,
    load_mnist_test_labels,
    normalize,
)
from ppcnn.utility import FileError

MNIST_IMAGES = [bytes([0, 255, 51, 102]), bytes([255, 255, 0, 17]), bytes([1, 2, 3, 4])]
MNIST_LABELS = [7, 2, 9]


@pytest.fixture
def mnist_dir(tmp_path):
    header = struct.pack(">IIII", 0x803, len(MNIST_IMAGES), 2, 2)
    (tmp_path / "t10k-images-idx3-ubyte").write_bytes(header + b"".join(MNIST_IMAGES))
    label_header = struct.pack(">II", 0x801, len(MNIST_LABELS))
    (tmp_path / "t10k-labels-idx1-ubyte").write_bytes(label_header + bytes(MNIST_LABELS))
    return str(tmp_path)


def _cifar_records():
    first = bytes([3]) + bytes([255] * IMAGE_SIZE)
    second = bytes([8]) + bytes(i % 256 for i in range(IMAGE_SIZE))
    return [first, second]


@pytest.fixture
def cifar_dir(tmp_path):
    (tmp_path / "test_batch.bin").write_bytes(b"".join(_cifar_records()))
    return str(tmp_path)


def test_normalize_in_place():
    images = [[255, 0, 51]]
    normalize(images)
    assert images[0] == pytest.approx([1.0, 0.0, 0.2])


def test_normalize_round_trip_scale():
    original = [[10, 20, 30], [200, 100, 0]]
    images = [list(row) for row in original]
    normalize(images)
    for before, after in zip(original, images):
        assert [a * NORMALIZE_DENOM for a in after] == pytest.approx(before)


def test_normalize_empty_is_noop():
    images = []
    normalize(images)
    assert images == []


def test_load_mnist_test_images(mnist_dir):
    images = load_mnist_test_images(mnist_dir, 0)
    assert len(images) == len(MNIST_IMAGES)
    for raw, image in zip(MNIST_IMAGES, images):
        assert [p * NORMALIZE_DENOM for p in image] == pytest.approx(list(raw))
        assert all(0.0 <= p <= 1.0 for p in image)


def test_load_mnist_test_images_limit(mnist_dir):
    images = load_mnist_test_images(mnist_dir, 2)
    assert len(images) == 2
    assert images[0][1] == 1.0


def test_load_mnist_test_labels(mnist_dir):
    assert load_mnist_test_labels(mnist_dir, 0) == MNIST_LABELS
    assert load_mnist_test_labels(mnist_dir, 1) == MNIST_LABELS[:1]


def test_load_mnist_missing_dir(tmp_path):
    with pytest.raises(FileError):
        load_mnist_test_images(str(tmp_path / "absent"), 1)


def test_load_cifar10_test_images(cifar_dir):
    images = load_cifar10_test_images(cifar_dir, 2)
    records = _cifar_records()
    assert len(images) == 2
    assert all(len(image) == IMAGE_SIZE for image in images)
    assert set(images[0]) == {1.0}
    assert [p * NORMALIZE_DENOM for p in images[1]] == pytest.approx(list(records[1][1:]))


def test_load_cifar10_test_labels(cifar_dir):
    assert load_cifar10_test_labels(cifar_dir, 2) == [3, 8]
    assert load_cifar10_test_labels(cifar_dir, 1) == [3]


def test_load_cifar10_missing_dir(tmp_path):
    with pytest.raises(FileError):
        load_cifar10_test_labels(str(tmp_path / "absent"), 1)