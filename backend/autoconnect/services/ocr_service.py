"""OCR Service - bill image to text lines, then text lines to structured bill data.

Invariants:
    - scan_image(None) raises InvalidInputError("No file uploaded") before any API call
    - Zero extracted lines raises EmptyResultError("No text extracted")
    - Successful scans return the lines as compact JSON ('["Item 1","Item 2"]')
    - parse_bill sends that JSON string verbatim as the user message
"""

import json
import logging
from typing import Any, Protocol

from autoconnect.core.errors import EmptyResultError, InvalidInputError

logger = logging.getLogger(__name__)

BILL_EXTRACTION_PROMPT = (
    "You extract structured data from receipts and invoices. The user message "
    "is a JSON array of text lines read from one bill by OCR, in reading order. "
    "Reply with a single JSON object and nothing else, using these keys:\n"
    '- "issuer": merchant or company name, or null\n'
    '- "date": bill date as YYYY-MM-DD, or null\n'
    '- "invoiceNumber": bill or invoice number, or null\n'
    '- "items": array of {"description", "quantity", "unitPrice", "amount"}\n'
    '- "subtotal", "tax", "total": numbers, or null\n'
    '- "currency": ISO 4217 code if it can be inferred, else "LKR"\n'
    "Use numbers (not strings) for all amounts. Do not invent values that "
    "are not present in the lines."
)


class TextExtractor(Protocol):
    async def extract_text(self, image: bytes) -> list[str]: ...


class JSONCompleter(Protocol):
    async def complete_json(self, user_content: str, system_prompt: str) -> Any: ...


async def scan_image(vision: TextExtractor, image: bytes | None) -> str:
    if image is None:
        raise InvalidInputError("No file uploaded")
    lines = await vision.extract_text(image)
    if not lines:
        raise EmptyResultError("No text extracted")
    logger.info(f"OCR extracted {len(lines)} lines")
    return json.dumps(lines, ensure_ascii=False, separators=(",", ":"))


async def parse_bill(llm: JSONCompleter, ocr_data: str) -> Any:
    return await llm.complete_json(ocr_data, BILL_EXTRACTION_PROMPT)
