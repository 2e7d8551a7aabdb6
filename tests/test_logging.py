import logging

import pytest

from runefinder.logging import ForeignFilter, describe_error


@pytest.mark.parametrize(
    "logger_name,want",
    [
        ("runefinder", True),
        ("runefinder.utils", True),
        ("runefinder.scripts.lookup", True),
        ("urllib3.connectionpool", False),
        ("runefinderx", False),
        ("root", False),
    ],
)
def test_foreign_filter(logger_name, want):
    record = logging.LogRecord(logger_name, logging.INFO, __file__, 1, "msg", None, None)
    assert ForeignFilter().filter(record) == want


@pytest.mark.parametrize(
    "exc,want",
    [
        (FileNotFoundError(2, "No such file or directory"), "FileNotFoundError: [Errno 2] No such file or directory"),
        (KeyboardInterrupt(), "KeyboardInterrupt"),
        (ValueError("bad value"), "ValueError: bad value"),
    ],
)
def test_describe_error(exc, want):
    assert describe_error(type(exc), exc) == want
