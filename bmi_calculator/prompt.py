import re
import sys
from typing import Callable, Optional, TextIO, TypeVar

from loguru import logger

from bmi_calculator.errors import InputStreamError, InvalidInputError

T = TypeVar("T")

# ASCII digits only, no digit grouping
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def parse_float(text: str) -> float:
    """
    Parse a plain decimal float literal.

    Unlike ``float`` this rejects underscores and non-ASCII digits, so
    ``"1_8"`` is an error rather than 18.0.
    """
    if not _FLOAT_LITERAL.fullmatch(text):
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def _read_line(stdin: TextIO) -> str:
    try:
        line = stdin.readline()
    except OSError as e:
        raise InputStreamError(f"Could not read from input: {e}") from e
    if line == "":
        raise InputStreamError("Input stream closed")
    return line.strip()


def ask_question(question: str, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> str:
    """
    Print the question and return the next line of input, trimmed.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    print(question, file=stdout, flush=True)
    return _read_line(stdin)


def ask(
    question: str,
    parse: Callable[[str], T] = parse_float,
    retry: bool = True,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> T:
    """
    Ask a question until the answer parses with ``parse``.

    Each attempt prints the question and consumes one line. A failed parse
    prints the error and asks again, with no limit on attempts. With
    ``retry=False`` the first failed parse raises InvalidInputError instead.
    InputStreamError is raised when the input itself runs out or fails.
    """
    stdout = sys.stdout if stdout is None else stdout
    while True:
        text = ask_question(question, stdin=stdin, stdout=stdout)
        try:
            return parse(text)
        except ValueError as e:
            logger.debug(f"Could not parse {text!r}: {e}")
            if not retry:
                raise InvalidInputError(text, str(e)) from e
            print(f"Error: {e}", file=stdout, flush=True)
