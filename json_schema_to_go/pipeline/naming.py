"""
Identifier synthesis for generated Go code.

Turns schema property names and enum values into exported Go identifiers,
with acronym-aware capitalization, and derives names for inline enums from
the common prefix of their values.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

# Word separator inside schema names and enum values
SEPARATOR = "_"

# Used when nothing usable is left of a name
PLACEHOLDER = "Value"

_META_NAME = "_meta"
_META_IDENTIFIER = "Meta"

_SEPARATOR_PATTERN = re.compile(r"[-. ]")
_INVALID_PATTERN = re.compile(r"[^A-Za-z0-9_]")

# aB -> a|B, ABc -> A|Bc (an uppercase run stays whole, the last capital starts the next word)
# and 3Bc -> 3|Bc
_CASE_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])|(?<=[0-9])(?=[A-Z][a-z])")

# Characters that cannot appear in a json struct tag key
_UNSAFE_TAG_PATTERN = re.compile(r'[`"\\\x00-\x1f]')


def _split_words(name: str) -> list[str]:
    """Split on separators and on camelCase boundaries."""
    words = []
    for chunk in name.split(SEPARATOR):
        words.extend(word for word in _CASE_BOUNDARY.split(chunk) if word)
    return words


def _is_acronym_compound(word: str, acronyms: frozenset[str]) -> bool:
    """
    Check whether an upper-case word was assembled from acronyms.

    The word must split into acronym tokens and digit runs, plus at most one
    single letter, with at least one acronym: APIURL, ID2, XAPI, AHTTP.
    TASK or IDLE do not qualify.
    """
    if not word.isupper():
        return False
    lower = word.lower()
    # (position, acronym seen) -> fewest single letters needed to get there
    best: dict[tuple[int, bool], int] = {(0, False): 0}
    for start in range(len(lower)):
        for seen in (False, True):
            singles = best.get((start, seen))
            if singles is None:
                continue
            for end in range(start + 1, len(lower) + 1):
                piece = lower[start:end]
                if piece in acronyms:
                    state, count = (end, True), singles
                elif piece.isdigit():
                    state, count = (end, seen), singles
                elif len(piece) == 1:
                    state, count = (end, seen), singles + 1
                else:
                    continue
                if count <= 1 and count < best.get(state, 2):
                    best[state] = count
    return (len(lower), True) in best


def _case_word(word: str, acronyms: frozenset[str], preserve_case: bool) -> str:
    lower = word.lower()
    if lower in acronyms or _is_acronym_compound(word, acronyms):
        return word.upper()
    if preserve_case:
        return word[0].upper() + word[1:]
    return lower.capitalize()


def to_identifier(raw_name: Any, acronyms: frozenset[str], preserve_case: bool = False) -> str:
    """
    Convert an arbitrary schema name into an exported Go identifier.

    Examples (default acronyms):
        "first_name" -> "FirstName"
        "userId" -> "UserID"
        "api-key" -> "APIKey"
        "TASK_STATE" -> "TaskState"
        "_meta" -> "Meta"
        "123" -> "Value"
        "x-api-key" -> "XAPIKey"

    Args:
        raw_name: Property name, enum value or prefix to convert
        acronyms: Lowercase tokens rendered fully upper-case
        preserve_case: Keep the casing of word tails instead of title-casing them.
            Used for enum constants so "ACTIVE" stays "ACTIVE".

    Returns:
        A non-empty identifier that starts with an upper-case letter
    """
    name = str(raw_name)
    if name == _META_NAME:
        return _META_IDENTIFIER

    name = name.lstrip("_0123456789")
    if not name:
        return PLACEHOLDER

    name = _SEPARATOR_PATTERN.sub(SEPARATOR, name)
    name = _INVALID_PATTERN.sub("", name)

    result = "".join(_case_word(word, acronyms, preserve_case) for word in _split_words(name))
    result = result[:1].upper() + result[1:]

    if not result or result[0].isdigit():
        result = PLACEHOLDER + result
    return result


def is_tag_safe(name: str) -> bool:
    """Whether a property name can be written into a json struct tag as-is."""
    return not _UNSAFE_TAG_PATTERN.search(name)


def common_prefix(values: list[str]) -> str:
    """Longest literal prefix shared by all values (shrink-on-mismatch)."""
    if not values:
        return ""
    prefix = values[0]
    for value in values[1:]:
        while not value.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def meaningful_prefix(values: list[str]) -> str:
    """
    Common prefix of the values, if it looks like a word boundary.

    The prefix must be longer than 2 characters and either end with the
    separator or be followed by the separator in at least one value.
    Otherwise "" is returned.
    """
    prefix = common_prefix(values)
    if len(prefix) <= 2:
        return ""
    if prefix.endswith(SEPARATOR):
        return prefix
    if any(value[len(prefix) : len(prefix) + 1] == SEPARATOR for value in values):
        return prefix
    return ""


def derive_enum_name(enum_values: Iterable[Any], fallback_name: Any, acronyms: frozenset[str]) -> str:
    """
    Derive a type name for an inline enum.

    ["TASK_STATE_RUNNING", "TASK_STATE_DONE"] -> "TaskState"; values without a
    meaningful common prefix fall back to the property name.

    Args:
        enum_values: The enum literals, non-strings are ignored
        fallback_name: Property name used when no prefix qualifies
        acronyms: Lowercase acronym tokens

    Returns:
        Type name for the enum
    """
    strings = [value for value in enum_values if isinstance(value, str)]
    prefix = meaningful_prefix(strings)
    if prefix:
        if prefix.endswith(SEPARATOR):
            prefix = prefix[: -len(SEPARATOR)]
        name = to_identifier(prefix, acronyms)
        if name != PLACEHOLDER:
            return name
    return to_identifier(fallback_name, acronyms)
