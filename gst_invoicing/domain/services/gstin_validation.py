# gst_invoicing/domain/services/gstin_validation.py

import re

from gst_invoicing.domain.services.state_codes import state_name_for_code

PAN_REGEX = re.compile(r"^[A-Z]{5}[0-9]{4}[A-Z]$")
GSTIN_REGEX = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]$")
GSTIN_LENGTH = 15


def normalize_gstin(gstin: str | None) -> str | None:
    """Strip and upper-case user input. Blank input becomes ``None``."""
    if gstin is None:
        return None
    gstin = str(gstin).strip().upper()
    return gstin or None


def validate_gstin(gstin: str | None) -> bool:
    """
    Structural check only: state code, PAN, entity code, ``Z``, check char.

    Input is taken as-is (no trimming or upper-casing), so call
    ``normalize_gstin`` first on raw form data. The mod-36 check digit is
    not verified.
    """
    if not isinstance(gstin, str) or len(gstin) != GSTIN_LENGTH:
        return False
    return bool(GSTIN_REGEX.match(gstin))


def get_state_from_gstin(gstin: str | None) -> str | None:
    """State name for the GSTIN's first two digits, or ``None``."""
    if not validate_gstin(gstin):
        return None
    return state_name_for_code(gstin[:2])


def pan_from_gstin(gstin: str | None) -> str | None:
    """Characters 3-12 of a valid GSTIN are the holder's PAN."""
    if not validate_gstin(gstin):
        return None
    pan = gstin[2:12]
    return pan if PAN_REGEX.match(pan) else None
