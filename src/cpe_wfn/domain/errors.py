"""Validation error taxonomy for WFN attribute values."""

from __future__ import annotations

from enum import StrEnum


class ValidationErrorKind(StrEnum):
    EMPTY_VALUE = "empty_value"
    CONTAINS_WHITESPACE = "contains_whitespace"
    QUOTED_HYPHEN_ONLY = "quoted_hyphen_only"
    INVALID_VALUE = "invalid_value"
    UNKNOWN_ATTRIBUTE = "unknown_attribute"
    UNQUOTED_CHARACTER = "unquoted_character"
    MISPLACED_WILDCARD = "misplaced_wildcard"


_DEFAULT_MESSAGES: dict[ValidationErrorKind, str] = {
    ValidationErrorKind.EMPTY_VALUE: "attribute value must not be empty",
    ValidationErrorKind.CONTAINS_WHITESPACE: "attribute value must not contain whitespace",
    ValidationErrorKind.QUOTED_HYPHEN_ONLY: "attribute value must not be a lone quoted hyphen",
    ValidationErrorKind.INVALID_VALUE: "invalid value",
    ValidationErrorKind.UNKNOWN_ATTRIBUTE: "unknown attribute name",
    ValidationErrorKind.UNQUOTED_CHARACTER: "special character must be quoted",
    ValidationErrorKind.MISPLACED_WILDCARD: "wildcards may only lead or trail the value",
}


class WfnValidationError(ValueError):
    """Raised when a candidate cannot be installed in a WFN attribute."""

    def __init__(
        self,
        kind: ValidationErrorKind,
        *,
        candidate: object = None,
        attribute: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.kind = kind
        self.candidate = candidate
        self.attribute = attribute
        self.detail = detail if detail is not None else _DEFAULT_MESSAGES[kind]
        if attribute is not None:
            path = attribute
        elif kind is ValidationErrorKind.UNKNOWN_ATTRIBUTE:
            path = "attribute"
        else:
            path = "value"
        super().__init__(f"{path}: {self.detail} ({kind.value}, got {candidate!r})")

    def with_attribute(self, attribute: str) -> WfnValidationError:
        """Return a copy of this error bound to ``attribute``."""
        return WfnValidationError(
            self.kind, candidate=self.candidate, attribute=attribute, detail=self.detail
        )


__all__ = ["ValidationErrorKind", "WfnValidationError"]
