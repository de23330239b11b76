import io
import sys

import pytest

from ppcnn.data import BasicData, EmptyDataError, PlainData
from ppcnn.utility import FileError


def test_basic_data_is_abstract():
    with pytest.raises(TypeError):
        BasicData()


def test_data_returns_first_item():
    data = PlainData("q")
    data.push(5)
    data.push(6)
    assert data.data() == 5
    assert data.vdata() == [5, 6]


def test_empty_data_raises():
    data = PlainData()
    with pytest.raises(EmptyDataError):
        data.data()
    with pytest.raises(EmptyDataError):
        data.vdata()


def test_clear_empties():
    data = PlainData()
    data.push(1)
    data.clear()
    with pytest.raises(EmptyDataError):
        data.data()


def test_wire_bytes():
    data = PlainData("i")
    data.push(7)
    buffer = io.BytesIO()
    written = data.save(buffer)
    expected = (1).to_bytes(8, sys.byteorder) + (7).to_bytes(4, sys.byteorder, signed=True)
    assert buffer.getvalue() == expected
    assert written == len(expected)


def test_empty_save_writes_nothing():
    buffer = io.BytesIO()
    assert PlainData().save(buffer) == 0
    assert buffer.getvalue() == b""


def test_round_trip_floats():
    source = PlainData("d")
    for value in (1.5, -2.25, 0.0):
        source.push(value)
    buffer = io.BytesIO()
    source.save(buffer)
    buffer.seek(0)
    target = PlainData("d")
    target.push(99.0)
    read = target.load(buffer)
    assert target.vdata() == [1.5, -2.25, 0.0]
    assert read == source.stream_size()


def test_stream_size_matches_layout():
    data = PlainData("q")
    for value in range(3):
        data.push(value)
    assert data.stream_size() == 8 + 3 * 8


def test_truncated_stream_raises():
    data = PlainData("q")
    data.push(1)
    data.push(2)
    buffer = io.BytesIO()
    data.save(buffer)
    truncated = io.BytesIO(buffer.getvalue()[:-3])
    with pytest.raises(ValueError):
        PlainData("q").load(truncated)


def test_file_round_trip(tmp_path):
    path = str(tmp_path / "plain.bin")
    data = PlainData("q")
    data.push(-3)
    data.push(12)
    data.save_to_file(path)
    loaded = PlainData("q")
    loaded.load_from_file(path)
    assert loaded.vdata() == [-3, 12]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileError):
        PlainData().load_from_file(str(tmp_path / "missing.bin"))


def test_invalid_format_rejected():
    with pytest.raises(ValueError):
        PlainData("2i")