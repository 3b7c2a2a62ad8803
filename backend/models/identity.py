from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict

class IdentityRecord(BaseModel):
    """
    Normalized result of one payload parse.
    - None means "not produced for this payload shape"
    - "" means "known to be absent, do not render"
    - "N/A" means "expected but missing, render as unknown"
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    reference_id: Optional[str] = Field(default=None, alias="referenceId")
    uid: Optional[str] = Field(default=None, description="Masked identifier, never the raw value")
    name: Optional[str] = None
    care_of: Optional[str] = Field(default=None, alias="careOf")
    date_of_birth: Optional[str] = Field(default=None, alias="dateOfBirth", description="Full date or year of birth")
    gender: Optional[str] = None

    # Structured address (markup payloads)
    building: Optional[str] = None
    street: Optional[str] = None
    landmark: Optional[str] = None
    locality: Optional[str] = None
    vtc_name: Optional[str] = Field(default=None, alias="vtcName")
    po_name: Optional[str] = Field(default=None, alias="poName")
    district_name: Optional[str] = Field(default=None, alias="districtName")
    state_name: Optional[str] = Field(default=None, alias="stateName")
    pincode: Optional[str] = None

    # Flat address (delimited payloads)
    address: Optional[str] = None

    raw_data: str = Field(..., alias="rawData")
    parse_error: Optional[str] = Field(default=None, alias="parseError")

    def to_display(self) -> Dict[str, str]:
        # empty strings survive, only absent fields are dropped
        return self.model_dump(by_alias=True, exclude_none=True)
