"""Bill Scan Schemas - response of the OCR + LLM bill pipeline."""

from typing import Any

from pydantic import BaseModel

from autoconnect.schemas.account import CamelModel


class BillScanData(BaseModel):
    ocr: str
    llm: Any


class BillScanResponse(CamelModel):
    success: bool = True
    data: BillScanData
    file_name: str | None = None
