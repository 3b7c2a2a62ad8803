from fastapi import APIRouter
from pydantic import BaseModel, Field
from typing import Any, Dict

from backend.models.common import PayloadFormat
from backend.services.payload_parser import detect_format, parse
from backend.services.presenter import present

router = APIRouter()

class ParseRequest(BaseModel):
    payload: str = Field(..., description="Text exactly as returned by the QR decoder")

class ParseResponse(BaseModel):
    format: PayloadFormat
    record: Dict[str, str]
    display: Dict[str, Any]

@router.post("/parse", response_model=ParseResponse)
def parse_payload(req: ParseRequest):
    # parse() contains its own faults, so any string gets a 200.
    # detect_format is the same check parse() branches on, so the two always agree.
    record = parse(req.payload)
    return ParseResponse(
        format=detect_format(req.payload),
        record=record.to_display(),
        display=present(record),
    )
