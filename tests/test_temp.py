"""Tests for temporary directories."""

import sys

import pytest


class TestTempDir:

    def test_creates_directory(self, lib):
        with lib.temp_dir() as dir:
            assert dir.path.is_dir()

    def test_path_is_absolute(self, lib, tmp):
        assert tmp.path.is_absolute()

    def test_path_str_returns_the_path(self, lib, tmp):
        assert tmp.path_str == str(tmp.path)

    def test_deletes_directory_on_close(self, lib):
        dir = lib.TempDir()
        path = dir.path
        dir.close()
        assert not path.exists()

    def test_deletes_non_empty_directory(self, lib):
        with lib.temp_dir() as dir:
            path = dir.path
            dir.create_file("root.txt", "text")
            dir.create_file("a/file.txt", "text")
            dir.create_file("c/sub/file.txt", "text")
        assert not path.exists()

    def test_creates_file_at_root(self, lib, tmp):
        file_path = tmp.create_file("some_file.txt", "some file contents")
        assert file_path.is_file()
        assert file_path.read_text() == "some file contents"

    def test_creates_file_in_sub_directory(self, lib, tmp):
        file_path = tmp.create_file("sub/a/b/simple_file.txt", "abc")
        assert file_path.is_file()
        assert (tmp.path / "sub").is_dir()
        assert file_path.read_text() == "abc"

    def test_creates_binary_file(self, lib, tmp):
        file_path = tmp.create_file("data.bin", b"\x00\x01")
        assert file_path.read_bytes() == b"\x00\x01"

    def test_does_not_create_file_outside_directory(self, lib, tmp):
        with pytest.raises(lib.TempDirError, match="outside temp dir"):
            tmp.create_file("sub/../../test_file.txt", "should not be created")
        assert not (tmp.path.parent / "test_file.txt").exists()

    def test_does_not_accept_absolute_paths_elsewhere(self, lib, tmp):
        with lib.temp_dir() as other:
            with pytest.raises(ValueError):
                tmp.create_file(str(other.path / "file.txt"), "x")

    def test_run_bin_uses_directory_as_cwd(self, lib, tmp, monkeypatch):
        monkeypatch.setattr(lib.process, "get_bin", lambda name: sys.executable)
        tmp.create_file("hello.txt", "hello from file")
        output = tmp.run_bin("python", ["-c", "print(open('hello.txt').read())"])
        assert output.strip() == "hello from file"
