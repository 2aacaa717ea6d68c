from rich.console import Console
from rich.table import Table
from rich.logging import RichHandler
from typing import Any
import logging

from camelintent.config import CamelIntentConfig, load_config


# Singleton Console instance
def get_console() -> Console:
    if not hasattr(get_console, "_console"):
        get_console._console = Console()
    return get_console._console


def print_table(headers: list[str], rows: list[list[Any]], title: str | None = None, caption: str | None = None):
    """Print a formatted table using Rich library.

    Args:
        headers (list[str]): Column headers for the table.
        rows (list[list[Any]]): Data rows to display in the table.
        title (str | None, optional): Title of the table. Defaults to None.
        caption (str | None, optional): Text shown below the table. Defaults to None.
    """
    table = Table(title=title, caption=caption)
    for header in headers:
        table.add_column(header)
    for row in rows:
        table.add_row(*[str(cell) for cell in row])
    get_console().print(table)


class RichConsoleLogger(logging.Logger):
    """Logger writing through a RichHandler, plus a log file in debug mode."""

    def __init__(self, name: str, config: CamelIntentConfig | None = None):
        super().__init__(name)
        config = config or load_config()

        self.log_level_str = config.log_level
        self.log_level = logging.getLevelName(config.log_level)
        self.setLevel(self.log_level)

        # Configure handler with rich tracebacks
        handler = RichHandler(rich_tracebacks=True, level=self.log_level, console=Console(stderr=True))
        self.addHandler(handler)

        if config.debug:
            try:
                file_handler = logging.FileHandler(config.log_file)
                file_handler.setLevel(self.log_level)
                file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
                file_handler.setFormatter(file_formatter)
                self.addHandler(file_handler)
            except OSError as e:
                self.error(f"Failed to set up file logging: {e}")

    def success(self, message: str, *args, **kwargs):
        """Log a success message at INFO level with a check mark."""
        if args:
            message = message % args
        super().info(f"✔ {message}", **kwargs)


# Singleton logger instance
_console_logger = None

def get_console_logger(config: CamelIntentConfig | None = None) -> RichConsoleLogger:
    """Get a singleton instance of RichConsoleLogger configured from the environment.

    Environment variables:
        CAMELINTENT_LOG_LEVEL: Set the log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        CAMELINTENT_DEBUG: Enable debug mode with file logging (true, 1, yes)
        CAMELINTENT_LOG_FILE: Specify the log file path (default: camelintent.log)

    Returns:
        RichConsoleLogger: Configured logger instance
    """
    global _console_logger
    if _console_logger is None:
        _console_logger = RichConsoleLogger(__name__, config)
    return _console_logger
