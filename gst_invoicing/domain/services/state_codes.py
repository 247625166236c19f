# gst_invoicing/domain/services/state_codes.py
"""
GST state-code reference table and state identifier canonicalisation.

The table is the fixed set of jurisdictions this engine knows about. Union
territories such as Chandigarh, Ladakh or Puducherry are deliberately absent;
their GSTINs resolve to ``None``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

INDIAN_STATES: Mapping[str, str] = MappingProxyType({
    "Andhra Pradesh": "37",
    "Arunachal Pradesh": "12",
    "Assam": "18",
    "Bihar": "10",
    "Chhattisgarh": "22",
    "Delhi": "07",
    "Goa": "30",
    "Gujarat": "24",
    "Haryana": "06",
    "Himachal Pradesh": "02",
    "Jharkhand": "20",
    "Karnataka": "29",
    "Kerala": "32",
    "Madhya Pradesh": "23",
    "Maharashtra": "27",
    "Manipur": "14",
    "Meghalaya": "17",
    "Mizoram": "15",
    "Nagaland": "13",
    "Odisha": "21",
    "Punjab": "03",
    "Rajasthan": "08",
    "Sikkim": "11",
    "Tamil Nadu": "33",
    "Telangana": "36",
    "Tripura": "16",
    "Uttar Pradesh": "09",
    "Uttarakhand": "05",
    "West Bengal": "19",
})

_STATES_BY_CODE: Mapping[str, str] = MappingProxyType(
    {code: name for name, code in INDIAN_STATES.items()}
)
_STATES_BY_FOLDED_NAME: Mapping[str, str] = MappingProxyType(
    {name.casefold(): name for name in INDIAN_STATES}
)


def state_name_for_code(code: str | None) -> Optional[str]:
    """``"27"`` -> ``"Maharashtra"``; unknown codes give ``None``."""
    if not code:
        return None
    return _STATES_BY_CODE.get(code.strip())


def state_code_for_name(name: str | None) -> Optional[str]:
    """Case-insensitive name lookup: ``"maharashtra "`` -> ``"27"``."""
    if not name:
        return None
    canonical = _STATES_BY_FOLDED_NAME.get(name.strip().casefold())
    return INDIAN_STATES[canonical] if canonical else None


def canonical_state(value: str | None) -> str:
    """
    Reduce a caller-supplied state identifier to a comparison key.

    Known names and 2-digit codes both map to the table's spelling of the
    state, so ``"27"``, ``"Maharashtra"`` and ``" MAHARASHTRA"`` are all
    equal. Anything else is trimmed and case-folded.
    """
    if value is None:
        return ""
    stripped = str(value).strip()
    by_code = _STATES_BY_CODE.get(stripped)
    if by_code:
        return by_code.casefold()
    return stripped.casefold()


def same_state(a: str | None, b: str | None) -> bool:
    return canonical_state(a) == canonical_state(b)
