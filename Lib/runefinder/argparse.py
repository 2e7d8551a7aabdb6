from argparse import ArgumentParser

from runefinder import __version__


class RFArgumentParser(ArgumentParser):
    """ArgumentParser with the logging and version options every
    runefinder script understands."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.add_argument(
            "--log-level",
            choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
            default="INFO",
        )
        self.add_argument(
            "--show-tracebacks",
            action="store_true",
            help=(
                "By default, errors only print out a message. Use this "
                "to include the traceback."
            ),
        )
        self.add_argument(
            "--version", "-v", action="version", version="%(prog)s " + __version__
        )
