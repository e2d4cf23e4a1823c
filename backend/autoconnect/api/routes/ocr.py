"""Bill Scan Route - uploaded bill image -> OCR text lines -> LLM-structured bill data.

Invariants:
    - Upload rules (image type, size limit) are checked before any external call
    - The filename and declared size are checked before reading; at most max_bytes + 1
      bytes are ever read into memory
    - 400-class failures (no file, rejected upload, no text) pass through unchanged
    - Every other failure answers 500 "Failed to process bill" with the cause in `error`
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from autoconnect.api.dependencies import get_llm_client, get_vision_client
from autoconnect.config import get_settings
from autoconnect.core.errors import AutoConnectError, BillProcessingError
from autoconnect.core.upload_rules import check_image_upload
from autoconnect.infrastructure.llm_client import JSONCompletionClient
from autoconnect.infrastructure.vision_client import VisionReadClient
from autoconnect.schemas.ocr import BillScanData, BillScanResponse
from autoconnect.services.ocr_service import parse_bill, scan_image

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/ocr", tags=["ocr"])


async def read_bill_image(upload: UploadFile, max_bytes: int) -> bytes:
    """Read an accepted upload without buffering more than max_bytes + 1 bytes."""
    check_image_upload(upload.filename, upload.size or 0, max_bytes)
    image = await upload.read(max_bytes + 1)
    check_image_upload(upload.filename, len(image), max_bytes)
    return image


@router.post("")
async def process_bill(
    bill_image: UploadFile | None = File(None, alias="billImage"),
    vision: VisionReadClient = Depends(get_vision_client),
    llm: JSONCompletionClient = Depends(get_llm_client),
):
    """Scan a bill image and return both the raw OCR lines and the parsed bill."""
    image: bytes | None = None
    file_name: str | None = None
    if bill_image is not None:
        file_name = bill_image.filename
        image = await read_bill_image(bill_image, get_settings().upload_max_bytes)

    try:
        ocr_data = await scan_image(vision, image)
        parsed = await parse_bill(llm, ocr_data)
    except AutoConnectError as e:
        if e.http_status < 500:
            raise
        raise BillProcessingError(e.message)
    except Exception as e:
        logger.error(f"Unexpected bill processing failure: {e}", exc_info=True)
        raise BillProcessingError(str(e))

    return BillScanResponse(
        data=BillScanData(ocr=ocr_data, llm=parsed), file_name=file_name,
    ).model_dump(by_alias=True)
