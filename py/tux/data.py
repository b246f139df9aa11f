"""Support for tests based on text files.

Every ``.input`` file under a directory is a test case. Its text is passed to
a callback and the output is compared against the ``.valid`` file with the
same name. Both sides are normalized with `tux.text.lines`, so differences in
line breaks and surrounding whitespace are ignored.

When a ``.valid`` file is missing the case fails and the actual output is
written to a ``.valid.new`` file next to the input, so that expected outputs
can be generated by inspecting and renaming it.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Union

from . import diff, text
from .types import TestDataError

logger = logging.getLogger(__name__)

# Changing these requires renaming every testdata fixture.
INPUT_EXTENSION = "input"
VALID_EXTENSION = "valid"
NEW_VALID_EXTENSION = "valid.new"


@dataclass
class TestInput:
    """A single ``.input`` file."""
    __test__ = False

    name: str
    path: Path
    text: str


@dataclass
class TestResult:
    """Outcome of running the callback for one input."""
    __test__ = False

    success: bool
    name: str
    valid_file: str
    expect: Optional[List[str]]
    actual: List[str]


@dataclass
class TestRun:
    """Results for every input in a testdata directory."""
    __test__ = False

    results: List[TestResult] = field(default_factory=list)

    def success(self) -> bool:
        return all(it.success for it in self.results)

    def all(self) -> List[TestResult]:
        return list(self.results)

    def failed(self) -> List[TestResult]:
        return [it for it in self.results if not it.success]

    def check(self) -> None:
        """Log the outcome of each case and raise if any of them failed.

        The raised `TestDataError` includes a report for each failed case:
        the diff between actual and expected output, or a note about the
        generated ``.valid.new`` file.
        """
        for it in self.results:
            if it.success:
                logger.info("passed: %s", it.name)
            else:
                logger.warning("failed: %s", it.name)

        failed = self.failed()
        if not failed:
            return

        report = []
        for it in failed:
            if it.expect is not None:
                report.append(f"=> `{it.name}` output did not match `{it.valid_file}`:")
                report.append("")
                report.append(str(diff.lines(it.actual, it.expect)))
            else:
                report.append(f"=> `{it.valid_file}` for test `{it.name}` not found")
                report.append(f".. created `{it.valid_file}.new` with the current test output")
            report.append("")

        report.append("===== Failed tests =====")
        report.append("")
        report.extend(f"- {it.name}" for it in failed)
        report.append("")

        count = len(failed)
        report.append(f"{count} test case{'s' if count != 1 else ''} failed")
        raise TestDataError("\n".join(report))


class TestData:
    """Runs a callback over every ``.input`` file found under `source`."""
    __test__ = False

    def __init__(self, source: Union[str, Path], callback: Callable[[TestInput], str]):
        self.callback = callback
        self.tests = collect_test_inputs(source)

    def run(self) -> TestRun:
        output = TestRun()
        for test_input in self.tests:
            output_text = self.callback(test_input)
            output_lines = text.lines(output_text)

            valid_path = test_input.path.with_suffix("." + VALID_EXTENSION)
            try:
                raw_text = valid_path.read_text(encoding="utf-8")
            except FileNotFoundError:
                # generate the expected output from the current one
                new_valid_path = test_input.path.with_suffix("." + NEW_VALID_EXTENSION)
                new_valid_path.write_text(output_text, encoding="utf-8")
                logger.info("created %s", new_valid_path)
                expected_lines = None
                succeeded = False
            else:
                expected_lines = text.lines(raw_text)
                succeeded = text.join_lines(output_lines) == text.join_lines(expected_lines)

            output.results.append(TestResult(
                success=succeeded,
                name=test_input.name,
                valid_file=valid_path.name,
                expect=expected_lines,
                actual=output_lines,
            ))
        return output


def collect_test_inputs(source: Union[str, Path]) -> List[TestInput]:
    """Find all ``.input`` files, breadth first and sorted by name."""
    inputs = []
    pending = deque([(Path(source), "")])
    while pending:
        current_dir, current_name = pending.popleft()
        # sorting keeps the order of the tests stable
        for entry in sorted(current_dir.iterdir(), key=lambda p: p.name):
            entry_name = f"{current_name}/{entry.name}" if current_name else entry.name
            if entry.is_dir():
                pending.append((entry, entry_name))
            elif entry.suffix == "." + INPUT_EXTENSION:
                inputs.append(TestInput(
                    name=entry_name,
                    path=entry,
                    text=entry.read_text(encoding="utf-8"),
                ))
    logger.debug("collected %d test inputs from %s", len(inputs), source)
    return inputs


def _line_callback(callback: Callable[[List[str]], List[str]]) -> Callable[[TestInput], str]:
    def run_case(test_input: TestInput) -> str:
        return text.join_lines(callback(text.lines(test_input.text)))
    return run_case


def testdata_to_result(path: Union[str, Path],
                       callback: Callable[[List[str]], List[str]]) -> TestRun:
    """Run the testdata cases in `path` and return the results.

    The callback receives the input lines and returns the output lines.
    """
    return TestData(path, _line_callback(callback)).run()


def testdata(path: Union[str, Path], callback: Callable[[List[str]], List[str]]) -> None:
    """Run the testdata cases in `path`, raising `TestDataError` on failure."""
    testdata_to_result(path, callback).check()


testdata.__test__ = False
testdata_to_result.__test__ = False
