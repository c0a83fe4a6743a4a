import os
import sys

import pytest

from kdutils.dir import Dir


@pytest.fixture
def tst_dir(tmp_path):
    directory = tmp_path / "bin"
    directory.mkdir()
    return directory


def test_check_exists(tst_dir, monkeypatch):
    monkeypatch.chdir(tst_dir.parent)
    assert not Dir("some_path_that_doesn_t_exist").exists()
    assert Dir(tst_dir).exists()


def test_file_is_not_an_existing_dir(tst_dir):
    target = tst_dir / "plain.txt"
    target.write_bytes(b"x")
    assert not Dir(target).exists()


def test_check_dir_name(tst_dir):
    assert Dir(tst_dir).dir_name() == "bin"


def test_check_absolute_file_path(tst_dir):
    d = Dir(tst_dir)
    file_name = "some_file.txt"
    abs_path = d.absolute_file_path(file_name)
    assert len(abs_path) >= len(file_name) + len(d.dir_name()) + 1
    assert abs_path.endswith(file_name)
    assert os.path.isabs(abs_path)


def test_absolute_file_path_of_relative_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = Dir("rel").absolute_file_path("a.txt")
    expected = Dir.from_native_separators(os.path.join(os.getcwd(), "rel", "a.txt"))
    assert result == expected


def test_check_can_create_dir(tst_dir):
    d = Dir(tst_dir / "new_test_dir")
    assert not d.exists()
    assert d.mkdir()
    assert d.exists()
    assert not d.mkdir()


def test_mkdir_fails_without_parent(tst_dir):
    d = Dir(tst_dir / "missing" / "child")
    assert not d.mkdir()
    assert not d.exists()


def test_check_can_remove_dir(tst_dir):
    target = tst_dir / "new_test_dir"
    target.mkdir()
    (target / "inner.txt").write_bytes(b"data")
    d = Dir(target)
    assert d.exists()
    assert d.rmdir()
    assert not d.exists()
    assert not d.rmdir()


def test_check_application_dir():
    app_dir = Dir.application_dir()
    assert app_dir.exists()
    executable_name = os.path.basename(os.path.realpath(sys.executable))
    assert os.path.isfile(app_dir.absolute_file_path(executable_name))


def test_check_strip_trailing_separator(tst_dir):
    d = Dir(str(tst_dir) + os.sep)
    assert d.path() == Dir.from_native_separators(str(tst_dir))
    assert d.dir_name() == "bin"


def test_equality_ignores_trailing_separator(tst_dir):
    assert Dir(str(tst_dir) + os.sep) == Dir(tst_dir)
    assert hash(Dir(str(tst_dir) + os.sep)) == hash(Dir(tst_dir))
    assert Dir(tst_dir) != Dir(tst_dir / "other")


def test_default_dir_is_empty():
    d = Dir()
    assert d.path() == ""
    assert not d.exists()
    assert not d.mkdir()
    assert not d.rmdir()


def test_root_keeps_its_separator():
    root = os.path.abspath(os.sep)
    assert Dir(root).exists()
    assert Dir(root).dir_name() == ""