"""
cpe-wfn — domain layer

Purpose
- The WFN attribute-value data model: the four-way value domain shared by all
  attributes, the validated free-text payload, the ``part`` enumeration, and
  the eleven-slot ``Wfn`` aggregate.

Functional requirements
- Payload types are valid by construction; consumers never re-validate.
- A rejected assignment leaves the target slot untouched.

Non-functional requirements
- No IO, no handler installation, no shared mutable state.
"""

from cpe_wfn.domain.errors import ValidationErrorKind, WfnValidationError
from cpe_wfn.domain.lexical import check_avstring, has_wildcards, split_wildcards
from cpe_wfn.domain.values import (
    ANY,
    NA,
    UNSPECIFIED,
    AttributeString,
    AttributeValue,
    Logical,
    Part,
    Value,
    present,
)
from cpe_wfn.domain.wfn import Wfn

__all__ = [
    "ANY",
    "NA",
    "UNSPECIFIED",
    "AttributeString",
    "AttributeValue",
    "Logical",
    "Part",
    "ValidationErrorKind",
    "Value",
    "Wfn",
    "WfnValidationError",
    "check_avstring",
    "has_wildcards",
    "present",
    "split_wildcards",
]
