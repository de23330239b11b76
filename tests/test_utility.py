from unittest.mock import patch

import pytest

from ppcnn.utility import (
    FileError,
    basename,
    dir_exist,
    file_exist,
    file_size,
    gen_uuid,
    get_dirname,
    get_extname,
    get_filelist,
    get_filename,
    getenv,
    isdigit,
    remove_file,
    split,
    trim_string,
)


def test_file_exist_true_and_false(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abc")
    assert file_exist(str(path)) is True
    assert file_exist(str(tmp_path / "missing.bin")) is False


def test_dir_exist(tmp_path):
    assert dir_exist(str(tmp_path)) is True
    assert dir_exist(str(tmp_path / "nope")) is False


def test_file_size_matches_content(tmp_path):
    data = b"hello world"
    path = tmp_path / "f.bin"
    path.write_bytes(data)
    assert file_size(str(path)) == len(data)


def test_file_size_missing_raises(tmp_path):
    with pytest.raises(FileError, match="failed to open"):
        file_size(str(tmp_path / "missing"))


def test_remove_file(tmp_path):
    path = tmp_path / "gone.txt"
    path.write_text("x")
    assert remove_file(str(path)) is True
    assert not path.exists()
    assert remove_file(str(path)) is False


def test_basename():
    assert basename("a/b/c.txt") == "c.txt"
    assert basename("plain") == "plain"
    assert basename("dir/") == ""


@pytest.mark.parametrize(
    "text, expected",
    [("12345", True), ("", False), ("12a", False), ("-1", False), ("٣", False)],
)
def test_isdigit(text, expected):
    assert isdigit(text) is expected


def test_getenv(monkeypatch):
    monkeypatch.setenv("PPCNN_TEST_VAR", "value")
    assert getenv("PPCNN_TEST_VAR") == "value"
    monkeypatch.delenv("PPCNN_TEST_VAR")
    assert getenv("PPCNN_TEST_VAR") == ""


def test_split_multiple_delimiters():
    assert split("key = value, other", " ,=\t\r\n") == ["key", "value", "other"]


def test_split_edge_cases():
    assert split("", " ") == []
    assert split("   ", " ") == []
    assert split("whole", "") == ["whole"]
    assert split(",,a,,b,,", ",") == ["a", "b"]


def test_gen_uuid_range_and_seeded_by_time():
    with patch("time.time", return_value=1000.0):
        first = gen_uuid()
        second = gen_uuid()
    assert first == second
    assert 0 <= first <= 2**31 - 1


def test_trim_string():
    assert trim_string(" \t abc \t") == "abc"
    assert trim_string("   ") == ""
    assert trim_string("xxabcxx", "x") == "abc"


def test_get_filelist(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.bin").write_text("b")
    (tmp_path / "sub").mkdir()
    directory = str(tmp_path)
    assert sorted(get_filelist(directory)) == [
        f"{directory}/a.txt",
        f"{directory}/b.bin",
    ]
    assert get_filelist(directory, "txt") == [f"{directory}/a.txt"]


def test_get_filelist_missing_directory(tmp_path):
    assert get_filelist(str(tmp_path / "missing")) == []


def test_get_filename():
    assert get_filename("dir/sub/file.txt") == "file.txt"
    assert get_filename("dir/README", True) == "README"


def test_get_dirname():
    assert get_dirname("dir/sub/file.txt") == "dir/sub/"
    assert get_dirname("file.txt") == ""


def test_get_extname():
    assert get_extname("dir/file.tar.gz") == "gz"
    assert get_extname("dir.d/noext") == "noext"