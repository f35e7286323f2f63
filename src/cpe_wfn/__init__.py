"""
cpe-wfn — Well-Formed CPE Names

Purpose
- Package root. Re-exports the WFN data model and its validation errors.

Import boundary rules
- No side effects at import time: no config loading, no logging handlers.
- Config and observability helpers are imported from their subpackages.
"""

from cpe_wfn.domain import (
    ANY,
    NA,
    UNSPECIFIED,
    AttributeString,
    AttributeValue,
    Logical,
    Part,
    ValidationErrorKind,
    Value,
    Wfn,
    WfnValidationError,
)

__version__ = "0.1.0"

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
    "__version__",
]
