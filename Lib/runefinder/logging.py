import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
PACKAGE = "runefinder"


class ForeignFilter(logging.Filter):
    """Only let through records from runefinder's own loggers."""

    def filter(self, record):
        return record.name == PACKAGE or record.name.startswith(PACKAGE + ".")


def stderr_handler():
    # stdout carries the matches only
    return RichHandler(console=Console(stderr=True), show_path=False)


def describe_error(exc_type, value):
    message = str(value)
    if not message:
        return exc_type.__name__
    return f"{exc_type.__name__}: {message}"


def setup_logging(facility, args, name):
    python_minus_m = name == "__main__"
    user_mode = not python_minus_m and not getattr(args, "show_tracebacks", False)

    handler = stderr_handler()
    if user_mode:
        handler.addFilter(ForeignFilter())

    # force, so that calling main() twice in one process rebinds the handler
    logging.basicConfig(
        level=args.log_level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )

    log = logging.getLogger(facility)

    def user_error_messages(exc_type, value, _traceback):
        """Log escaping exceptions as a single line. The interpreter still
        exits with status 1 afterwards."""
        log.fatal(describe_error(exc_type, value))

    if user_mode:
        sys.excepthook = user_error_messages

    return log
