"""Pattern grammars for fraction, decimal, and count measurements."""

import re
from dataclasses import dataclass

from recipeparse.schemas import Notation

# =============================================================================
# Token Patterns
# =============================================================================

# "2", "1/2", "1 1/2"
FRACTION_AMOUNT = r"(?:\d+/\d+|\d+(?: \d+/\d+)?)"

# ".25", "2", "1.5" (up to four decimal places)
DECIMAL_AMOUNT = r"(?:\.\d{1,4}|\d+(?:\.\d{1,4})?)"

# "c", "cup", "Tbsp.", "fl."
UNIT_TOKEN = r"[a-zA-Z]+\.*"

# Measurements are limited to one or two parts, e.g. "1 qt 1.5 c"
MAX_PARTS = 2


@dataclass(frozen=True)
class NotationGrammar:
    """Compiled patterns describing one measurement notation.

    Attributes:
        notation: The notation these patterns recognize.
        line_test: Whole-line classifier: measurement, space, item text.
        span: Measurement prefix of a line (one or two parts).
        part: A single "amount unit" piece, for use with finditer.
            None when the notation cannot be split into measures.
        amount: The amount at the start of a single piece.
    """

    notation: Notation
    line_test: re.Pattern[str]
    span: re.Pattern[str]
    part: re.Pattern[str] | None
    amount: re.Pattern[str]


def _measured_grammar(notation: Notation, amount: str) -> NotationGrammar:
    piece = rf"{amount} ?{UNIT_TOKEN}"
    return NotationGrammar(
        notation=notation,
        line_test=re.compile(rf"^(?:{piece} ){{1,{MAX_PARTS}}}[\w ]+\Z", re.ASCII),
        span=re.compile(rf"(?:{piece} ?){{1,{MAX_PARTS}}}", re.ASCII),
        part=re.compile(rf"{piece} ?", re.ASCII),
        amount=re.compile(amount, re.ASCII),
    )


FRACTION_GRAMMAR = _measured_grammar(Notation.FRACTION, FRACTION_AMOUNT)
DECIMAL_GRAMMAR = _measured_grammar(Notation.DECIMAL, DECIMAL_AMOUNT)

# A bare amount followed by free text, e.g. "2 eggs". There is no unit to
# normalize, so count lines can be extracted but not decomposed.
COUNT_GRAMMAR = NotationGrammar(
    notation=Notation.COUNT,
    line_test=re.compile(rf"^{FRACTION_AMOUNT} [\w .]+", re.ASCII),
    span=re.compile(rf"{FRACTION_AMOUNT} ", re.ASCII),
    part=None,
    amount=re.compile(FRACTION_AMOUNT, re.ASCII),
)

# Classification order: the first grammar whose line test matches wins
GRAMMARS: tuple[NotationGrammar, ...] = (FRACTION_GRAMMAR, DECIMAL_GRAMMAR, COUNT_GRAMMAR)

_GRAMMARS_BY_NOTATION = {grammar.notation: grammar for grammar in GRAMMARS}


def grammar_for(notation: Notation) -> NotationGrammar:
    """Get the grammar for a notation."""
    return _GRAMMARS_BY_NOTATION[notation]


def classify_notation(line: str) -> Notation | None:
    """
    Determine which notation an ingredient line is written in.

    Fraction is tried first, then decimal, then count. Returns None when the
    line matches none of them.

    Examples:
        "1 1/2 cup flour" -> Notation.FRACTION
        "1.5 Tbsp ginger ale" -> Notation.DECIMAL
        "2 eggs" -> Notation.COUNT
        "a pinch of salt" -> None
    """
    for grammar in GRAMMARS:
        if grammar.line_test.match(line):
            return grammar.notation
    return None
