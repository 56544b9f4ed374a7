"""Turn free-text bound entries into numbers.

:func:`parse_input` is forgiving: it never raises.  A bound that does not
evaluate falls back to its leading numeral, then to zero.
"""

import logging
import math
import re
from dataclasses import dataclass

from sphregion.errors import ExpressionError
from sphregion.expr import evaluate

logger = logging.getLogger(__name__)

PI_GLYPH = 'π'

_NUMERAL = r'(?:\d+\.?\d*|\.\d+)'
_PRODUCT_RE = re.compile(r'(' + _NUMERAL + r')\s*\*?\s*(?:π|pi)')
_BARE_PI_RE = re.compile(r'(?<!\d)(?:π|pi)(?!\d)')
_LEADING_RE = re.compile(r'\s*([+-]?' + _NUMERAL + r'(?:[eE][+-]?\d+)?)')


@dataclass(frozen=True)
class ParsedInput:
    """A bound entry as shown to the user and as a number."""
    display: str
    numeric: float


def display_form(value) -> str:
    """Lower-case, trimmed ``value`` with every ``pi`` shown as ``π``."""
    return str(value).strip().lower().replace('pi', PI_GLYPH)


def substitute_pi(text: str) -> str:
    """Replace pi in ``text`` by its decimal value.

    ``2pi`` and ``2*pi`` become an explicit product; a bare pi becomes
    the number itself.
    """
    text = _PRODUCT_RE.sub(lambda m: f"{m.group(1)}*{math.pi!r}", text)
    return _BARE_PI_RE.sub(repr(math.pi), text)


def leading_number(text: str) -> float:
    """Return the numeral at the start of ``text``, or 0.0 if there is none."""
    match = _LEADING_RE.match(text)
    if match is None:
        return 0.0
    return float(match.group(1))


def parse_input(value) -> ParsedInput:
    """Parse a bound entry such as ``"3pi/2"``, ``"2*pi"`` or ``"0.5"``.

    Parameters
    ----------
    value : object
        The raw entry; converted with ``str``.

    Returns
    -------
    ParsedInput
        ``display`` is the trimmed, lower-cased text with ``π`` for every
        ``pi``.  ``numeric`` is the value of the arithmetic expression, or
        the leading numeral of the pi-substituted text when the expression
        does not evaluate, or 0.0 when there is no leading numeral.
    """
    text = str(value).strip().lower()
    display = display_form(text)
    try:
        numeric = evaluate(text)
    except ExpressionError as err:
        numeric = leading_number(substitute_pi(text))
        logger.debug("could not evaluate %r (%s), using %r", text, err, numeric)
    return ParsedInput(display, float(numeric))
