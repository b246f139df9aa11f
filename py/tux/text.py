"""Text utilities for tests."""

from typing import Iterable, List


def split_lines(text: str) -> List[str]:
    """Split text into lines without the line breaks.

    Unlike ``str.splitlines`` only ``\\n``, ``\\r`` and ``\\r\\n`` are
    considered line breaks. A break at the very end does not produce an
    extra empty line.
    """
    if not text:
        return []

    result = []
    start = 0
    i = 0
    while i < len(text):
        if text[i] == '\n':
            result.append(text[start:i])
            start = i + 1
        elif text[i] == '\r':
            result.append(text[start:i])
            if i + 1 < len(text) and text[i + 1] == '\n':
                i += 1
            start = i + 1
        i += 1

    # Handle remaining content without trailing newline
    if start < len(text):
        result.append(text[start:])

    return result


def trim_lines(input_lines: Iterable[str]) -> List[str]:
    """Remove extra whitespace from a sequence of lines.

    Trailing whitespace is removed from every line, and leading and trailing
    blank lines are dropped. Blank lines in the middle and leading
    indentation are kept.
    """
    output = [line.rstrip() for line in input_lines]

    start = 0
    while start < len(output) and not output[start]:
        start += 1

    end = len(output)
    while end > start and not output[end - 1]:
        end -= 1

    return output[start:end]


def lines(text: str) -> List[str]:
    """Split text into lines and clean up excess whitespace with `trim_lines`."""
    return trim_lines(split_lines(text))


def trim(text: str) -> str:
    """Normalize a block of text, removing excess indentation.

    The text goes through `lines` and then the indentation of the first
    non-blank line is stripped from every line that starts with it. Lines
    are joined back with ``\\n``. Useful for literal strings in tests::

        trim('''
            Line 1
                Line 2
            Line 3
        ''')  # 'Line 1\\n    Line 2\\nLine 3'
    """
    output = lines(text)
    if not output:
        return ""

    first = output[0]
    indent = first[:len(first) - len(first.lstrip())]
    return "\n".join(
        line[len(indent):] if line.startswith(indent) else line
        for line in output
    )


def join_lines(input_lines: Iterable[str]) -> str:
    """Join lines with ``\\n``."""
    return "\n".join(input_lines)
