"""Well-Formed CPE Name aggregate with per-attribute validated setters."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from cpe_wfn.constants import (
    ANY_TOKEN,
    ATTRIBUTE_NAMES,
    DISPLAY_PREFIX,
    EDITION,
    LANGUAGE,
    NA_TOKEN,
    OTHER,
    PART,
    PRODUCT,
    SW_EDITION,
    TARGET_HW,
    TARGET_SW,
    UPDATE,
    VENDOR,
    VERSION,
)
from cpe_wfn.domain.errors import ValidationErrorKind, WfnValidationError
from cpe_wfn.domain.values import (
    ANY,
    NA,
    UNSPECIFIED,
    AttributeString,
    AttributeValue,
    Part,
    Value,
    present,
)

_LOGGER = logging.getLogger(__name__)

_ATTRIBUTE_SET = frozenset(ATTRIBUTE_NAMES)


class Wfn:
    """A WFN: eleven independently typed attribute slots.

    A new instance has every slot unspecified. Slots change only through
    :meth:`set` (or the ``set_<attribute>`` shortcuts); a rejected candidate
    raises ``WfnValidationError`` and leaves the slot as it was.

    With ``strict=True`` the ten string attributes must also satisfy the full
    attribute-value-string lexical rules (quoting and wildcard placement).
    Equality compares the eleven slots only; the ``strict`` flag governs future
    assignments and is not part of the value.
    """

    __slots__ = (
        "_strict",
        "_part",
        "_vendor",
        "_product",
        "_version",
        "_update",
        "_edition",
        "_language",
        "_sw_edition",
        "_target_sw",
        "_target_hw",
        "_other",
    )

    _part: AttributeValue[Part]
    _vendor: AttributeValue[AttributeString]
    _product: AttributeValue[AttributeString]
    _version: AttributeValue[AttributeString]
    _update: AttributeValue[AttributeString]
    _edition: AttributeValue[AttributeString]
    _language: AttributeValue[AttributeString]
    _sw_edition: AttributeValue[AttributeString]
    _target_sw: AttributeValue[AttributeString]
    _target_hw: AttributeValue[AttributeString]
    _other: AttributeValue[AttributeString]

    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict
        for name in ATTRIBUTE_NAMES:
            setattr(self, f"_{name}", UNSPECIFIED)

    @classmethod
    def from_mapping(cls, values: Mapping[str, str], *, strict: bool = False) -> Wfn:
        """Build a WFN from ``{attribute: candidate}``; the first invalid entry raises."""
        for key in values:
            _require_attribute(key)
        wfn = cls(strict=strict)
        for name in ATTRIBUTE_NAMES:
            if name in values:
                wfn.set(name, values[name])
        return wfn

    @property
    def strict(self) -> bool:
        return self._strict

    # Generic access -----------------------------------------------------------

    def set(self, name: str, candidate: str) -> None:
        """Assign ``candidate`` to attribute ``name``.

        ``any`` and ``na`` (any case) select the logical values before the
        payload validator sees the candidate. Otherwise ``part`` goes through
        :meth:`Part.parse` and the other attributes through
        :class:`AttributeString`.
        """
        attribute = _require_attribute(name)
        try:
            value = self._parse(attribute, candidate)
        except WfnValidationError as exc:
            _LOGGER.debug(
                "rejected value for %s",
                attribute,
                extra={"attribute": attribute, "error_kind": exc.kind.value},
            )
            raise exc.with_attribute(attribute) from exc
        setattr(self, f"_{attribute}", value)
        _LOGGER.debug("assigned %s", attribute, extra={"attribute": attribute})

    def get(self, name: str) -> str | None:
        """Presentation value: ``None``, ``"ANY"``, ``"NA"``, or the canonical text."""
        return present(self.slot(name))

    def slot(self, name: str) -> AttributeValue[Part] | AttributeValue[AttributeString]:
        attribute = _require_attribute(name)
        value: AttributeValue[Part] | AttributeValue[AttributeString] = getattr(
            self, f"_{attribute}"
        )
        return value

    def attributes(
        self,
    ) -> Iterator[tuple[str, AttributeValue[Part] | AttributeValue[AttributeString]]]:
        for name in ATTRIBUTE_NAMES:
            yield name, getattr(self, f"_{name}")

    def to_dict(self) -> dict[str, str]:
        """Presentation values of every specified attribute, in attribute order."""
        out: dict[str, str] = {}
        for name, value in self.attributes():
            rendered = present(value)
            if rendered is not None:
                out[name] = rendered
        return out

    def display(self) -> str:
        pairs = ", ".join(f"{name}={rendered}" for name, rendered in self.to_dict().items())
        return f"{DISPLAY_PREFIX}[{pairs}]"

    def _parse(
        self, attribute: str, candidate: object
    ) -> AttributeValue[Part] | AttributeValue[AttributeString]:
        if not isinstance(candidate, str):
            raise WfnValidationError(
                ValidationErrorKind.INVALID_VALUE,
                candidate=candidate,
                detail=f"expected string, got {type(candidate).__name__}",
            )
        token = candidate.lower()
        if token == ANY_TOKEN:
            return ANY
        if token == NA_TOKEN:
            return NA
        if attribute == PART:
            return Value(Part.parse(candidate))
        if self._strict:
            return Value(AttributeString.strict(candidate))
        return Value(AttributeString(candidate))

    # Raw slots ----------------------------------------------------------------

    @property
    def part(self) -> AttributeValue[Part]:
        return self._part

    @property
    def vendor(self) -> AttributeValue[AttributeString]:
        return self._vendor

    @property
    def product(self) -> AttributeValue[AttributeString]:
        return self._product

    @property
    def version(self) -> AttributeValue[AttributeString]:
        return self._version

    @property
    def update(self) -> AttributeValue[AttributeString]:
        return self._update

    @property
    def edition(self) -> AttributeValue[AttributeString]:
        return self._edition

    @property
    def language(self) -> AttributeValue[AttributeString]:
        return self._language

    @property
    def sw_edition(self) -> AttributeValue[AttributeString]:
        return self._sw_edition

    @property
    def target_sw(self) -> AttributeValue[AttributeString]:
        return self._target_sw

    @property
    def target_hw(self) -> AttributeValue[AttributeString]:
        return self._target_hw

    @property
    def other(self) -> AttributeValue[AttributeString]:
        return self._other

    # Per-attribute setters ----------------------------------------------------

    def set_part(self, candidate: str) -> None:
        self.set(PART, candidate)

    def set_vendor(self, candidate: str) -> None:
        self.set(VENDOR, candidate)

    def set_product(self, candidate: str) -> None:
        self.set(PRODUCT, candidate)

    def set_version(self, candidate: str) -> None:
        self.set(VERSION, candidate)

    def set_update(self, candidate: str) -> None:
        self.set(UPDATE, candidate)

    def set_edition(self, candidate: str) -> None:
        self.set(EDITION, candidate)

    def set_language(self, candidate: str) -> None:
        self.set(LANGUAGE, candidate)

    def set_sw_edition(self, candidate: str) -> None:
        self.set(SW_EDITION, candidate)

    def set_target_sw(self, candidate: str) -> None:
        self.set(TARGET_SW, candidate)

    def set_target_hw(self, candidate: str) -> None:
        self.set(TARGET_HW, candidate)

    def set_other(self, candidate: str) -> None:
        self.set(OTHER, candidate)

    # Per-attribute getters ----------------------------------------------------

    def get_part(self) -> str | None:
        return self.get(PART)

    def get_vendor(self) -> str | None:
        return self.get(VENDOR)

    def get_product(self) -> str | None:
        return self.get(PRODUCT)

    def get_version(self) -> str | None:
        return self.get(VERSION)

    def get_update(self) -> str | None:
        return self.get(UPDATE)

    def get_edition(self) -> str | None:
        return self.get(EDITION)

    def get_language(self) -> str | None:
        return self.get(LANGUAGE)

    def get_sw_edition(self) -> str | None:
        return self.get(SW_EDITION)

    def get_target_sw(self) -> str | None:
        return self.get(TARGET_SW)

    def get_target_hw(self) -> str | None:
        return self.get(TARGET_HW)

    def get_other(self) -> str | None:
        return self.get(OTHER)

    # Dunder -------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wfn):
            return NotImplemented
        return list(self.attributes()) == list(other.attributes())

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        slots = ", ".join(f"{name}={value!r}" for name, value in self.attributes())
        return f"{self.__class__.__name__}({slots})"


def _require_attribute(name: object) -> str:
    if not isinstance(name, str) or name not in _ATTRIBUTE_SET:
        allowed = ", ".join(ATTRIBUTE_NAMES)
        raise WfnValidationError(
            ValidationErrorKind.UNKNOWN_ATTRIBUTE,
            candidate=name,
            detail=f"expected one of: {allowed}",
        )
    return name


__all__ = ["Wfn"]
