"""Stable constants shared by the WFN domain, config and logging layers."""

from __future__ import annotations

from typing import Final

# Attribute names in the fixed display order.
PART: Final[str] = "part"
VENDOR: Final[str] = "vendor"
PRODUCT: Final[str] = "product"
VERSION: Final[str] = "version"
UPDATE: Final[str] = "update"
EDITION: Final[str] = "edition"
LANGUAGE: Final[str] = "language"
SW_EDITION: Final[str] = "sw_edition"
TARGET_SW: Final[str] = "target_sw"
TARGET_HW: Final[str] = "target_hw"
OTHER: Final[str] = "other"

ATTRIBUTE_NAMES: Final[tuple[str, ...]] = (
    PART,
    VENDOR,
    PRODUCT,
    VERSION,
    UPDATE,
    EDITION,
    LANGUAGE,
    SW_EDITION,
    TARGET_SW,
    TARGET_HW,
    OTHER,
)
STRING_ATTRIBUTE_NAMES: Final[tuple[str, ...]] = ATTRIBUTE_NAMES[1:]

# Input tokens for the logical values, compared case-insensitively.
ANY_TOKEN: Final[str] = "any"
NA_TOKEN: Final[str] = "na"

# Presentation forms of the logical values.
ANY_DISPLAY: Final[str] = "ANY"
NA_DISPLAY: Final[str] = "NA"

QUOTED_HYPHEN: Final[str] = "\\-"
ESCAPE: Final[str] = "\\"

DISPLAY_PREFIX: Final[str] = "wfn: "

DEFAULT_CONFIG_FILE: Final[str] = "cpe_wfn.toml"
ENV_PREFIX: Final[str] = "CPE_WFN_"
PACKAGE_LOGGER_NAME: Final[str] = "cpe_wfn"

__all__ = [
    "ANY_DISPLAY",
    "ANY_TOKEN",
    "ATTRIBUTE_NAMES",
    "DEFAULT_CONFIG_FILE",
    "DISPLAY_PREFIX",
    "EDITION",
    "ENV_PREFIX",
    "ESCAPE",
    "LANGUAGE",
    "NA_DISPLAY",
    "NA_TOKEN",
    "OTHER",
    "PACKAGE_LOGGER_NAME",
    "PART",
    "PRODUCT",
    "QUOTED_HYPHEN",
    "STRING_ATTRIBUTE_NAMES",
    "SW_EDITION",
    "TARGET_HW",
    "TARGET_SW",
    "UPDATE",
    "VENDOR",
    "VERSION",
]
