"""Vision Read Client - Azure Computer Vision Read API (submit, then poll).

Invariants:
    - One POST per extract_text() call, then at most max_polls GETs on Operation-Location
    - Lines are returned in page order, then line order
    - "failed" status, an empty poll body, exhausted polls and HTTP errors all raise
      OcrProcessingError (core/errors.py)
    - No retry of the submit call

Design Decisions:
    - httpx.AsyncClient injected: one process-wide client, swapped for MockTransport in tests
    - poll_interval_seconds configurable so tests run without sleeping
"""

import asyncio
import logging

import httpx

from autoconnect.core.errors import OcrProcessingError

logger = logging.getLogger(__name__)

_READ_PATH = "/vision/v3.2/read/analyze"
_KEY_HEADER = "Ocp-Apim-Subscription-Key"


class VisionReadClient:
    """Extracts printed/handwritten text lines from an image."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        endpoint: str,
        api_key: str,
        max_polls: int = 10,
        poll_interval_seconds: float = 1.0,
    ):
        self.http = http
        self.endpoint = endpoint.rstrip("/")
        self.api_key = api_key
        self.max_polls = max_polls
        self.poll_interval_seconds = poll_interval_seconds

    async def extract_text(self, image: bytes) -> list[str]:
        operation_url = await self._submit(image)
        for attempt in range(self.max_polls):
            await asyncio.sleep(self.poll_interval_seconds)
            data = await self._poll(operation_url)
            if not data:
                raise OcrProcessingError("No data found in OCR result")
            status = data.get("status")
            if status == "succeeded":
                return _collect_lines(data)
            if status == "failed":
                raise OcrProcessingError("OCR processing failed")
            logger.debug(
                f"OCR operation still {status}", extra={"attempt": attempt + 1},
            )
        raise OcrProcessingError(
            "OCR processing timed out after multiple attempts",
        )

    async def _submit(self, image: bytes) -> str:
        try:
            response = await self.http.post(
                f"{self.endpoint}{_READ_PATH}",
                content=image,
                headers={
                    _KEY_HEADER: self.api_key,
                    "Content-Type": "application/octet-stream",
                },
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Vision submit failed: {e}")
            raise OcrProcessingError(f"Vision request failed: {e}")
        location = response.headers.get("operation-location")
        if not location:
            raise OcrProcessingError("Vision response missing Operation-Location")
        return location

    async def _poll(self, operation_url: str) -> dict | None:
        try:
            response = await self.http.get(
                operation_url, headers={_KEY_HEADER: self.api_key},
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Vision poll failed: {e}")
            raise OcrProcessingError(f"Vision request failed: {e}")
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None


def _collect_lines(data: dict) -> list[str]:
    pages = (data.get("analyzeResult") or {}).get("readResults") or []
    return [
        line["text"]
        for page in pages
        for line in page.get("lines") or []
        if line.get("text")
    ]
