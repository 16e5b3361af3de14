"""Ingredient extraction pipeline for caption text.

Turns free-form image captions into a sorted list of ingredient names.

Pipeline:
1. Tokenize: split on whitespace, newlines, commas and periods
2. Normalize: lowercase, replace anything outside [a-z0-9- ] with spaces
3. Noise filter: drop stopwords, measurement units, numbers and quantities
4. Whitelist: keep only words found in the ingredient vocabulary

Every stage is a pure function over the static tables in
src.data.ingredient_vocabulary, so extract() is safe to call from any
number of threads at once.
"""

import logging
import re
from collections.abc import Sequence

from src.data.ingredient_vocabulary import (
    INGREDIENT_SET,
    MEASUREMENTS,
    STOPWORDS,
    UNIT_ABBREVIATIONS,
)

logger = logging.getLogger(__name__)

MIN_TOKEN_LENGTH = 2

# Commas and periods separate words unless they sit between two digits, so "2.5"
# stays one token for the tokenizer.
_SEPARATOR_PATTERN = re.compile(r"\s+|[,.](?!\d)|(?<!\d)[,.]")
_NON_TOKEN_CHARS = re.compile(r"[^a-z0-9\- ]")
_NUMBER_PATTERN = re.compile(r"^\d+(\.\d+)?$")
_QUANTITY_PATTERN = re.compile(
    r"^(\d+/\d+|\d+(\.\d+)?)(" + "|".join(UNIT_ABBREVIATIONS) + r")s?$",
    re.IGNORECASE,
)


class InvalidInputError(ValueError):
    """Raised when extract() receives something other than text."""


# =========================================================================
# Tokenizer / Normalizer
# =========================================================================


def tokenize(text: str) -> list[str]:
    """Split raw caption text into word tokens.

    Args:
        text: Caption text, possibly with run-on punctuation ("rice,beans.corn").

    Returns:
        Non-empty raw tokens in input order.
    """
    return [token for token in _SEPARATOR_PATTERN.split(text) if token]


def normalize(token: str) -> str:
    """Lowercase a token and replace punctuation with spaces.

    Internal whitespace is preserved, so "chicken/breast" becomes
    "chicken breast".
    """
    return _NON_TOKEN_CHARS.sub(" ", token.lower()).strip()


# =========================================================================
# Noise Filter
# =========================================================================


def is_too_short(token: str) -> bool:
    return len(token) < MIN_TOKEN_LENGTH


def is_stopword(token: str) -> bool:
    return token in STOPWORDS


def is_measurement(token: str) -> bool:
    return token in MEASUREMENTS


def is_number(token: str) -> bool:
    """Match plain integers and decimals such as "3" or "2.5"."""
    return _NUMBER_PATTERN.match(token) is not None


def is_quantity(token: str) -> bool:
    """Match a number glued to a unit, e.g. "100g", "2cups" or "1/2tsp"."""
    return _QUANTITY_PATTERN.match(token) is not None


def is_noise(token: str) -> bool:
    """Check whether a normalized token can never be an ingredient.

    Noise takes priority over vocabulary membership: a word that is both a
    measurement and a vocabulary entry is still discarded.
    """
    return (
        is_too_short(token)
        or is_stopword(token)
        or is_measurement(token)
        or is_number(token)
        or is_quantity(token)
    )


# =========================================================================
# Whitelist Validator
# =========================================================================


def is_ingredient(token: str) -> bool:
    """Check a normalized token against the ingredient vocabulary.

    A multi-word token matches when the whole phrase or any one of its
    words is in the vocabulary.
    """
    if token in INGREDIENT_SET:
        return True
    words = token.split()
    if len(words) > 1:
        return any(word in INGREDIENT_SET for word in words)
    return False


# =========================================================================
# Orchestration
# =========================================================================


def _coerce_text(raw_text: str | Sequence[str]) -> str:
    if isinstance(raw_text, str):
        return raw_text
    if isinstance(raw_text, Sequence) and not isinstance(raw_text, (bytes, bytearray)):
        if all(isinstance(part, str) for part in raw_text):
            return " ".join(raw_text)
        raise InvalidInputError("All captions must be strings")
    raise InvalidInputError(
        f"Expected a string or a sequence of strings, got {type(raw_text).__name__}"
    )


def extract(raw_text: str | Sequence[str]) -> list[str]:
    """Extract ingredient names from caption text.

    Args:
        raw_text: A caption or a sequence of captions. Sequences are joined
            with a single space before tokenizing.

    Returns:
        Unique normalized ingredient names in ascending order. Empty when
        nothing in the text is a known ingredient.

    Raises:
        InvalidInputError: If raw_text is not a string or sequence of strings.
    """
    text = _coerce_text(raw_text)
    tokens = tokenize(text)

    found: set[str] = set()
    for token in tokens:
        # Punctuation inside a token ("salt&pepper") leaves several words behind.
        for word in normalize(token).split():
            if is_noise(word):
                continue
            if is_ingredient(word):
                found.add(word)

    ingredients = sorted(found)
    logger.debug(
        "Extracted %d ingredient(s) from %d token(s)", len(ingredients), len(tokens)
    )
    return ingredients
