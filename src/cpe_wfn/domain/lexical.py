"""Attribute-value string lexical rules (NIST IR 7695, section 5.3.2).

These rules layer on top of :class:`cpe_wfn.domain.values.AttributeString` and
are only applied when strict validation is requested. Text reaching this module
is already non-empty and whitespace-free.

- Unreserved characters (ASCII letters, digits, underscore) appear unquoted.
- Every other printable ASCII character appears quoted with a backslash.
- An unquoted ``*`` may lead and/or trail the value once; a run of unquoted
  ``?`` may lead and/or trail it. No unquoted wildcard appears elsewhere.
- A lone ``*`` is the logical ANY and not an attribute-value string.
"""

from __future__ import annotations

from typing import Final, NoReturn

from cpe_wfn.constants import ESCAPE
from cpe_wfn.domain.errors import ValidationErrorKind, WfnValidationError

ASTERISK: Final[str] = "*"
QUESTION_MARK: Final[str] = "?"
WILDCARDS: Final[frozenset[str]] = frozenset({ASTERISK, QUESTION_MARK})

_UNRESERVED: Final[frozenset[str]] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"
)
_PRINTABLE_SPECIAL: Final[frozenset[str]] = frozenset(
    chr(code) for code in range(0x21, 0x7F) if chr(code) not in _UNRESERVED
)


def check_avstring(text: str) -> None:
    """Raise ``WfnValidationError`` unless ``text`` is a legal attribute-value string."""
    _ = split_wildcards(text)


def has_wildcards(text: str) -> bool:
    """Whether a legal attribute-value string carries unquoted wildcards."""
    head, _, tail = split_wildcards(text)
    return bool(head or tail)


def split_wildcards(text: str) -> tuple[str, str, str]:
    """Split ``text`` into leading wildcards, literal body, and trailing wildcards."""
    if text == ASTERISK:
        _reject(ValidationErrorKind.MISPLACED_WILDCARD, text, "a lone asterisk is the logical ANY")

    head = _leading_wildcards(text)
    index = len(head)
    length = len(text)
    tail = ""

    while index < length:
        char = text[index]
        if char == ESCAPE:
            if index + 1 == length:
                _reject(ValidationErrorKind.UNQUOTED_CHARACTER, text, "dangling escape character")
            quoted = text[index + 1]
            if quoted not in _PRINTABLE_SPECIAL:
                _reject(
                    ValidationErrorKind.UNQUOTED_CHARACTER,
                    text,
                    f"only special characters may be quoted, got {quoted!r}",
                )
            index += 2
        elif char in WILDCARDS:
            rest = text[index:]
            if not _is_wildcard_run(rest):
                _reject(
                    ValidationErrorKind.MISPLACED_WILDCARD,
                    text,
                    f"unquoted {char!r} at position {index}",
                )
            tail = rest
            break
        elif char in _UNRESERVED:
            index += 1
        elif char in _PRINTABLE_SPECIAL:
            _reject(
                ValidationErrorKind.UNQUOTED_CHARACTER,
                text,
                f"{char!r} at position {index} must be quoted",
            )
        else:
            _reject(
                ValidationErrorKind.UNQUOTED_CHARACTER,
                text,
                f"{char!r} at position {index} is not printable ASCII",
            )

    body = text[len(head) : length - len(tail)]
    if not body and not (head and not tail and set(head) == {QUESTION_MARK}):
        _reject(ValidationErrorKind.MISPLACED_WILDCARD, text, "value holds only wildcards")
    return head, body, tail


def _leading_wildcards(text: str) -> str:
    if text.startswith(ASTERISK):
        return ASTERISK
    stripped = text.lstrip(QUESTION_MARK)
    return text[: len(text) - len(stripped)]


def _is_wildcard_run(text: str) -> bool:
    return text == ASTERISK or (bool(text) and set(text) == {QUESTION_MARK})


def _reject(kind: ValidationErrorKind, text: str, detail: str) -> NoReturn:
    raise WfnValidationError(kind, candidate=text, detail=detail)


__all__ = [
    "ASTERISK",
    "QUESTION_MARK",
    "WILDCARDS",
    "check_avstring",
    "has_wildcards",
    "split_wildcards",
]
