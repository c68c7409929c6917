"""Command-line settings for the dining simulation."""

from __future__ import annotations

from dataclasses import dataclass

INT_MAX = 2_147_483_647
MAX_PHILOSOPHERS = 200
_WHITESPACE = " \t\n\v\f\r"


class SettingsError(ValueError):
    """Raised when the simulation arguments are missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    max_meals: int | None = None


def parse_int(text: str) -> int:
    """Parse a non-negative decimal prefix of ``text``.

    Leading whitespace and one ``+`` are skipped, parsing stops at the first
    non-digit, and a value above ``INT_MAX`` yields ``-1``.
    """
    stripped = text.lstrip(_WHITESPACE)
    if stripped.startswith("+"):
        stripped = stripped[1:]
    result = 0
    for char in stripped:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
        if result > INT_MAX:
            return -1
    return result


def parse_settings(args) -> Settings:
    """Build :class:`Settings` from four or five argument strings."""
    args = list(args)
    if len(args) not in (4, 5):
        raise SettingsError("Invalid number of arguments")
    values = [parse_int(arg) for arg in args]
    count, *rest = values
    if not 1 <= count <= MAX_PHILOSOPHERS:
        raise SettingsError("Invalid arguments")
    if any(value <= 0 for value in rest):
        raise SettingsError("Invalid arguments")
    die, eat, sleep, *meals = rest
    return Settings(
        philosophers=count,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        max_meals=meals[0] if meals else None,
    )