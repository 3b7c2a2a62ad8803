from __future__ import annotations
import logging
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Tuple

from backend.models.common import (
    DATA_ELEMENT_TAG,
    MARKUP_PREFIX,
    MASK_PREFIX,
    NOT_AVAILABLE,
    PayloadFormat,
)
from backend.models.identity import IdentityRecord

logger = logging.getLogger(__name__)

# record field -> (primary attribute, legacy alias)
ATTRIBUTE_ALIASES: Dict[str, Tuple[str, Optional[str]]] = {
    "care_of": ("careOf", "co"),
    "building": ("building", "house"),
    "street": ("street", None),
    "landmark": ("landmark", "lm"),
    "locality": ("locality", "loc"),
    "vtc_name": ("vtcName", "vtc"),
    "po_name": ("poName", "po"),
    "district_name": ("districtName", "dist"),
    "state_name": ("stateName", "state"),
    "pincode": ("pincode", "pc"),
    "date_of_birth": ("dob", "yob"),
    "gender": ("gender", None),
}

# positional index -> record field
DELIMITED_FIELDS: List[str] = ["reference_id", "name", "date_of_birth", "gender", "address"]

DELIMITER_PRIORITY = ("|", ",")
FALLBACK_DELIMITER = "\n"


def detect_format(payload: str) -> PayloadFormat:
    if payload.startswith(MARKUP_PREFIX):
        return PayloadFormat.structured_markup
    return PayloadFormat.delimited


def select_delimiter(payload: str) -> str:
    for delim in DELIMITER_PRIORITY:
        if delim in payload:
            return delim
    return FALLBACK_DELIMITER


def mask_uid(raw_uid: str) -> str:
    """
    One-way masking of the national identifier.
    Shorter than 4 chars: mask everything, otherwise "last four" would be the whole value.
    """
    if not raw_uid:
        return NOT_AVAILABLE
    if len(raw_uid) < 4:
        return MASK_PREFIX + "XXXX"
    return MASK_PREFIX + raw_uid[-4:]


def _attr(el: ET.Element, primary: str, alias: Optional[str]) -> str:
    value = el.get(primary)
    if value:
        return value
    if alias:
        return el.get(alias) or ""
    return ""


def _find_data_element(root: ET.Element) -> Optional[ET.Element]:
    if root.tag == DATA_ELEMENT_TAG:
        return root
    return root.find(f".//{DATA_ELEMENT_TAG}")


def _parse_markup(payload: str) -> IdentityRecord:
    root = ET.fromstring(payload)
    el = _find_data_element(root)
    if el is None:
        # not an error: the document just isn't the printed-letter layout
        logger.debug("markup payload has no %s element", DATA_ELEMENT_TAG)
        return IdentityRecord(raw_data=payload)

    fields = {field: _attr(el, primary, alias) for field, (primary, alias) in ATTRIBUTE_ALIASES.items()}
    return IdentityRecord(
        uid=mask_uid(el.get("uid") or ""),
        name=el.get("name") or NOT_AVAILABLE,
        raw_data=payload,
        **fields,
    )


def _parse_delimited(payload: str) -> IdentityRecord:
    parts = payload.split(select_delimiter(payload))
    fields = {}
    for i, field in enumerate(DELIMITED_FIELDS):
        value = parts[i] if i < len(parts) else ""
        fields[field] = value or NOT_AVAILABLE
    # anything past the address column is dropped
    return IdentityRecord(raw_data=payload, **fields)


def parse(payload: str) -> IdentityRecord:
    """
    Interpret one decoded QR string. Never raises:
    faults come back as a record holding only rawData + parseError.
    """
    try:
        fmt = detect_format(payload)
        logger.debug("payload format=%s length=%d", fmt.value, len(payload))
        if fmt == PayloadFormat.structured_markup:
            return _parse_markup(payload)
        return _parse_delimited(payload)
    except Exception as e:
        message = str(e) or type(e).__name__
        logger.warning("payload parse failed (length=%d): %s", len(payload), message)
        return IdentityRecord(raw_data=payload, parse_error=message)
