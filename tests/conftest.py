"""Shared test configuration for tux."""

import os
import sys
import pytest


def load_python_impl():
    """Load the package from the source tree."""
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    py_dir = os.path.join(base_dir, "py")
    if py_dir not in sys.path:
        sys.path.insert(0, py_dir)
    import tux
    return tux


TESTDATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "testdata")


@pytest.fixture(scope="session")
def lib():
    """Load the implementation."""
    return load_python_impl()


@pytest.fixture
def tmp(lib):
    """A temporary directory removed after the test."""
    with lib.temp_dir() as dir:
        yield dir


@pytest.fixture
def write_case(tmp):
    """Write an .input file and its .valid counterpart."""
    def write(input_file, input_text, expected):
        tmp.create_file(input_file, input_text)
        basename = input_file[:-len(".input")]
        tmp.create_file(f"{basename}.valid", expected)
    return write


def render(lib, source, result):
    """Diff two sequences and render the script."""
    return lib.render_diff(lib.diff_lines(source, result), source, result)


def apply_script(lib, script, source, result):
    """Rebuild `result` by walking the script over both sequences."""
    output = []
    offset_source = 0
    offset_result = 0
    for op in script:
        if isinstance(op, lib.Output):
            output.extend(source[offset_source:offset_source + op.count])
            offset_source += op.count
            offset_result += op.count
        elif isinstance(op, lib.Delete):
            offset_source += op.count
        else:
            output.extend(result[offset_result:offset_result + op.count])
            offset_result += op.count
    assert offset_source == len(source)
    assert offset_result == len(result)
    return output


def check_canonical(lib, script):
    """No empty runs and no adjacent Output runs."""
    for op in script:
        assert op.count > 0
    for prev, op in zip(script, script[1:]):
        assert not (isinstance(prev, lib.Output) and isinstance(op, lib.Output))
        assert not (isinstance(prev, lib.Insert) and isinstance(op, lib.Delete))


def module_env():
    """Environment for running ``python -m tux`` from the source tree."""
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    env = os.environ.copy()
    paths = [os.path.join(base_dir, "py")]
    if env.get("PYTHONPATH"):
        paths.append(env["PYTHONPATH"])
    env["PYTHONPATH"] = os.pathsep.join(paths)
    env.pop("TUX_LOG_LEVEL", None)
    return env
