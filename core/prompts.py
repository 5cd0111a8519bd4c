"""Typed console prompts"""
import re
from decimal import Decimal, InvalidOperation
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape

from core.exceptions import InputConversionError
from core.models import to_hours

INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')

# SQLite INTEGER is a signed 64-bit value
MIN_INTEGER = -2 ** 63
MAX_INTEGER = 2 ** 63 - 1

# Digits allowed in the integer part of an hours value
MAX_HOURS_DIGITS = 100


def parse_int(text: Optional[str]) -> Optional[int]:
    """Convert trimmed user text to a 64-bit int. None stays None"""
    if text is None:
        return None

    if INTEGER_PATTERN.fullmatch(text):
        value = int(text)
        if MIN_INTEGER <= value <= MAX_INTEGER:
            return value

    raise InputConversionError(text, f"{text} is not a valid number.")


def parse_decimal(text: Optional[str]) -> Optional[Decimal]:
    """Convert trimmed user text to a Decimal with two fractional digits. None stays None"""
    if text is None:
        return None
    try:
        # Decimal() also accepts digit separators, user input must not
        if "_" in text:
            raise InvalidOperation(text)
        value = Decimal(text)
    except InvalidOperation:
        raise InputConversionError(text, f"{text} is not a valid decimal number.") from None

    if not value.is_finite():
        raise InputConversionError(text, f"{text} is not a valid decimal number.")
    if value.adjusted() >= MAX_HOURS_DIGITS:
        raise InputConversionError(text, f"{text} is too large a number of hours.")

    return to_hours(value)


class Prompter:
    """Reads one line per prompt from the console (or an explicit stream)"""

    def __init__(self, console: Console, stream: Optional[TextIO] = None):
        self.console = console
        self.stream = stream

    def text(self, prompt: str) -> Optional[str]:
        """Blank or whitespace-only input returns None. End of input counts as blank"""
        try:
            line = self.console.input(f"{escape(prompt)}: ", stream=self.stream)
        except EOFError:
            line = ""

        # stream.readline() keeps the newline and returns '' at end of input
        if not line.strip():
            return None
        return line.strip()

    def integer(self, prompt: str) -> Optional[int]:
        return parse_int(self.text(prompt))

    def decimal(self, prompt: str) -> Optional[Decimal]:
        return parse_decimal(self.text(prompt))
