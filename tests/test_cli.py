"""Tests for the command line entry point."""

import sys

import pytest

from conftest import TESTDATA_DIR, module_env


class TestDiffCommand:

    def test_equal_files(self, lib, tmp, capsys):
        from tux.__main__ import main
        old = tmp.create_file("old.txt", "a\nb\n")
        new = tmp.create_file("new.txt", "a\r\nb  \n\n")
        assert main(["diff", str(old), str(new)]) == 0
        assert capsys.readouterr().out == ""

    def test_different_files(self, lib, tmp, capsys):
        from tux.__main__ import main
        old = tmp.create_file("old.txt", "same 1\nsame 2\nsuffix 1\nsuffix 2\n")
        new = tmp.create_file("new.txt", "same 1\nsame 2\n")
        assert main(["diff", str(old), str(new)]) == 1
        assert capsys.readouterr().out == " same 1\n same 2\n-suffix 1\n-suffix 2\n"


class TestTestdataCommand:

    def test_passing_directory(self, lib, capsys):
        from tux.__main__ import main
        assert main(["testdata", "reverse", f"{TESTDATA_DIR}/reverse"]) == 0

    def test_failing_directory(self, lib, capsys):
        from tux.__main__ import main
        assert main(["testdata", "id", f"{TESTDATA_DIR}/failing"]) == 1
        err = capsys.readouterr().err
        assert "-fail\n+expected" in err
        assert "1 test case failed" in err

    def test_unknown_callback(self, lib):
        from tux.__main__ import main
        with pytest.raises(SystemExit):
            main(["testdata", "nope", TESTDATA_DIR])


class TestModuleExecution:

    def test_info(self, lib):
        output = lib.run_command([sys.executable, "-m", "tux", "info"], env=module_env())
        assert "tux testdata helper" in output

    def test_testdata_in_subprocess(self, lib, tmp, write_case):
        write_case("a.input", "1\n2", "2\n1")
        output = lib.run_command([sys.executable, "-m", "tux", "testdata", "reverse", tmp.path_str], env=module_env())
        assert output == ""

    def test_failed_testdata_exit_code(self, lib, tmp):
        tmp.create_file("a.input", "x")
        with pytest.raises(lib.ProcessError) as excinfo:
            lib.run_command([sys.executable, "-m", "tux", "testdata", "empty", tmp.path_str],
                            env=module_env())
        assert excinfo.value.returncode == 1
        assert "not found" in excinfo.value.stderr
