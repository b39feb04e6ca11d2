"""Regex assertions over CLI output and log files."""

import re


def assert_in_output(pattern: str, output: str) -> None:
    """Fail unless `pattern` matches somewhere in `output`."""
    if not re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in output:\n{output}")


def assert_not_in_output(pattern: str, output: str) -> None:
    """Fail if `pattern` matches anywhere in `output`."""
    if re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' found in output:\n{output}")
