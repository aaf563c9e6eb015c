"""String helpers used by search predicates and index parsing."""

import re
import traceback

from .checks import check_argument, require_non_null

# Largest index accepted from user input (signed 32-bit range).
MAX_INDEX = 2**31 - 1

_DIGITS = re.compile(r"[0-9]+")


def contains_subword(sentence: str, word: str) -> bool:
    """Check whether any word of ``sentence`` contains ``word``.

    Matching ignores case and accepts partial words:

        contains_subword("ABc def", "abc")  # True
        contains_subword("ABc def", "DEF")  # True
        contains_subword("ABc def", "AB")   # True
        contains_subword("ABc def", "Ac")   # False

    Args:
        sentence: Text to search. Must not be None.
        word: Single word to look for. Must not be None or blank.

    Returns:
        True if some whitespace-delimited token contains the word.

    Raises:
        TypeError: If either argument is None.
        ValueError: If word is blank or contains whitespace.
    """
    require_non_null(sentence, "sentence")
    require_non_null(word, "word")

    prepped_word = word.strip().lower()
    check_argument(bool(prepped_word), "Word parameter cannot be empty")
    check_argument(len(prepped_word.split()) == 1, "Word parameter should be a single word")

    return any(prepped_word in token.lower() for token in sentence.split())


def is_non_zero_unsigned_integer(s: str) -> bool:
    """Check whether ``s`` is a positive base-10 integer like ``1`` or ``42``.

    Signs, surrounding whitespace, embedded spaces, letters and values above
    MAX_INDEX are all rejected.

    Raises:
        TypeError: If s is None.
    """
    require_non_null(s, "s")

    if not _DIGITS.fullmatch(s):
        return False
    significant = s.lstrip("0")
    if len(significant) > len(str(MAX_INDEX)):
        return False
    value = int(significant or "0")
    return 0 < value <= MAX_INDEX


def get_details(exc: BaseException) -> str:
    """Return the exception message followed by its formatted traceback."""
    require_non_null(exc, "exc")
    trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return f"{exc}\n{trace}"
