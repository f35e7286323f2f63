"""Attribute value domain: logical values, validated strings, and the part enumeration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Final, Generic, TypeAlias, TypeVar, Union

from cpe_wfn.constants import ANY_DISPLAY, NA_DISPLAY, QUOTED_HYPHEN
from cpe_wfn.domain import lexical
from cpe_wfn.domain.errors import ValidationErrorKind, WfnValidationError

TPayload = TypeVar("TPayload")


class Logical(Enum):
    """Payload-free states shared by every WFN attribute."""

    # Never assigned. Matched like ANY, but omitted from the display form.
    UNSPECIFIED = "unspecified"
    # No restriction on the attribute.
    ANY = ANY_DISPLAY
    # No legal or meaningful value for the attribute.
    NA = NA_DISPLAY

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"


UNSPECIFIED: Final = Logical.UNSPECIFIED
ANY: Final = Logical.ANY
NA: Final = Logical.NA


@dataclass(frozen=True, slots=True)
class Value(Generic[TPayload]):
    """A concrete, already validated attribute payload."""

    payload: TPayload


AttributeValue: TypeAlias = Union[Logical, Value[TPayload]]

# str.isspace() also matches the C0 information separators, which are not Unicode White_Space.
_INFORMATION_SEPARATORS: Final[frozenset[str]] = frozenset("\x1c\x1d\x1e\x1f")


@dataclass(frozen=True, slots=True)
class AttributeString:
    """Free-text attribute payload.

    Construction is the validation: an instance only exists if its text is
    non-empty, holds no whitespace character at any position, and is not the
    lone quoted hyphen ``\\-``. A quoted hyphen inside a longer value is legal.
    Nothing beyond these rules is normalized; accepted text is kept verbatim.
    """

    value: str

    def __post_init__(self) -> None:
        text = self.value
        if not isinstance(text, str):
            raise WfnValidationError(
                ValidationErrorKind.INVALID_VALUE,
                candidate=text,
                detail=f"expected string, got {type(text).__name__}",
            )
        if not text:
            raise WfnValidationError(ValidationErrorKind.EMPTY_VALUE, candidate=text)
        if any(_is_whitespace(char) for char in text):
            raise WfnValidationError(ValidationErrorKind.CONTAINS_WHITESPACE, candidate=text)
        if text == QUOTED_HYPHEN:
            raise WfnValidationError(ValidationErrorKind.QUOTED_HYPHEN_ONLY, candidate=text)

    @classmethod
    def strict(cls, text: str) -> AttributeString:
        """Construct, then apply the full attribute-value-string lexical rules."""
        parsed = cls(text)
        lexical.check_avstring(parsed.value)
        return parsed

    @property
    def has_wildcards(self) -> bool:
        # Wildcards exist only under the strict rules; elsewhere "*" and "?" are literal.
        try:
            return lexical.has_wildcards(self.value)
        except WfnValidationError:
            return False

    def __str__(self) -> str:
        return self.value


class Part(StrEnum):
    """Closed set of ``part`` values; the enum value is the canonical letter."""

    APPLICATION = "a"
    OPERATING_SYSTEM = "o"
    HARDWARE = "h"

    @classmethod
    def parse(cls, candidate: str) -> Part:
        """Accept a single letter in either case; anything else is invalid."""
        if not isinstance(candidate, str):
            raise WfnValidationError(
                ValidationErrorKind.INVALID_VALUE,
                candidate=candidate,
                detail=f"expected string, got {type(candidate).__name__}",
            )
        part = _PART_TOKENS.get(candidate)
        if part is None:
            allowed = ", ".join(item.value for item in cls)
            raise WfnValidationError(
                ValidationErrorKind.INVALID_VALUE,
                candidate=candidate,
                detail=f"expected one of: {allowed} (any case)",
            )
        return part


_PART_TOKENS: Final[dict[str, Part]] = {
    token: part for part in Part for token in (part.value, part.value.upper())
}


def _is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _INFORMATION_SEPARATORS


def present(value: AttributeValue[object]) -> str | None:
    """Collapse an attribute value into its presentation form.

    ``None`` for an unspecified attribute, ``"ANY"``/``"NA"`` for the logical
    values, and the canonical text of the payload otherwise.
    """
    match value:
        case Logical.UNSPECIFIED:
            return None
        case Logical.ANY | Logical.NA:
            return value.value
        case Value(payload=payload):
            return str(payload)
    raise TypeError(f"not an attribute value: {value!r}")


__all__ = [
    "ANY",
    "NA",
    "UNSPECIFIED",
    "AttributeString",
    "AttributeValue",
    "Logical",
    "Part",
    "TPayload",
    "Value",
    "present",
]
