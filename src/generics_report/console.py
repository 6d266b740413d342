import logging
import sys

from colorama import Fore, Style, just_fix_windows_console

from .models import CollectedGenerics

LOGGER_NAME = "generics_report"


class ConsoleManager:
    """Manages diagnostic output, respecting quiet/verbose/color flags."""

    def __init__(self, level: int, no_color: bool):
        self.level = level
        self.no_color = no_color
        if not no_color:
            just_fix_windows_console()

        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(level)
        self._logger.propagate = False
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        self._logger.addHandler(handler)

    def _log(self, msg: str, log_level: int, color: str = "", exc_info: bool = False):
        if log_level < self.level:
            return

        if not self.no_color and color:
            msg = f"{color}{msg}{Style.RESET_ALL}"

        self._logger.log(log_level, msg, exc_info=exc_info)

    def debug(self, msg: str):
        self._log(msg, logging.DEBUG, Style.DIM)

    def info(self, msg: str):
        self._log(msg, logging.INFO)

    def warning(self, msg: str):
        self._log(msg, logging.WARNING, Fore.YELLOW)

    def error(self, msg: str):
        self._log(msg, logging.ERROR, Fore.RED)

    def critical(self, msg: str, exc_info: bool = False):
        self._log(msg, logging.CRITICAL, Fore.RED + Style.BRIGHT, exc_info=exc_info)

    def print_summary(self, collected: CollectedGenerics):
        """Print entry counts to stderr."""
        if self.level > logging.INFO:
            return

        summary_data = [
            ("Type Parameters", len(collected.types)),
            ("Lifetime Parameters", len(collected.lifetimes)),
            ("  - Distinct Lifetimes", collected.distinct_lifetimes),
            ("Contexts", collected.contexts),
        ]
        max_label = max(len(label) for label, _ in summary_data)

        print("\n--- Generics Summary ---", file=sys.stderr)
        for label, value in summary_data:
            val_str = str(value)
            if value > 0 and not self.no_color:
                val_str = f"{Fore.GREEN}{value}{Style.RESET_ALL}"
            print(f"{label:<{max_label}} : {val_str}", file=sys.stderr)
        print("------------------------", file=sys.stderr)
