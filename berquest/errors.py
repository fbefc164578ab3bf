"""Exceptions raised while checking arguments and maps, and their report text."""

from __future__ import annotations

RED = "\033[1;31m"
GREY = "\033[0;90m"
RESET = "\033[0m"


class GameError(Exception):
    """Base class for every error the game reports before quitting."""

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def report(self) -> str:
        """The coloured report printed for this error."""
        return format_error(self.message)


class ArgumentError(GameError):
    """The command line does not name a usable map file."""


class MapError(GameError):
    """The map file cannot be read or breaks one of the map rules."""


class PathError(MapError):
    """The player cannot reach every collectible and the exit."""


def format_error(message: str) -> str:
    """Coloured ``Error`` report around ``message``, ending with a newline."""
    return f"{RED}\nError\n{GREY}{message}\n{RESET}"