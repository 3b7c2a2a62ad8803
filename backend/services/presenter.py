from __future__ import annotations
from typing import Dict, List, Optional, Tuple

from backend.models.common import NOT_AVAILABLE
from backend.models.identity import IdentityRecord

UNKNOWN_MARKER = "Unknown"

# display order for both payload shapes
FIELD_LABELS: List[Tuple[str, str]] = [
    ("reference_id", "Reference ID"),
    ("uid", "UID"),
    ("name", "Name"),
    ("care_of", "C/O"),
    ("date_of_birth", "DOB"),
    ("gender", "Gender"),
    ("building", "Building"),
    ("street", "Street"),
    ("landmark", "Landmark"),
    ("locality", "Locality"),
    ("vtc_name", "VTC"),
    ("po_name", "Post Office"),
    ("district_name", "District"),
    ("state_name", "State"),
    ("pincode", "Pincode"),
    ("address", "Address"),
]


def render_lines(record: IdentityRecord) -> List[str]:
    lines = []
    for attr, label in FIELD_LABELS:
        value = getattr(record, attr)
        if not value:
            continue
        if value == NOT_AVAILABLE:
            value = UNKNOWN_MARKER
        lines.append(f"{label}: {value}")
    return lines


def present(record: IdentityRecord) -> Dict[str, object]:
    """
    Shape consumed by the scan UI:
      fields  -> rendered label lines (omits empty/absent)
      raw     -> always the scanned text, for the collapsed raw view
      warning -> parse fault message, shown next to whatever was recovered
    """
    warning: Optional[str] = record.parse_error
    return {
        "fields": render_lines(record),
        "raw": record.raw_data,
        "warning": warning,
    }
