"""
Client for the external document extraction service.

The service accepts a multipart upload (the raw MBL file plus a flat
key -> null schema) and answers with the same keys filled in from the
document. Calls are slow (OCR / vision), so the timeout is long and there
is exactly one attempt per call.
"""

import json
import logging

import httpx

from app.config import Settings
from app.errors import ExtractionFailure
from app.services.document_service import get_mime_type

logger = logging.getLogger("blconv.extraction")


class ExtractionClient:
    """Owns one pooled httpx.AsyncClient for the lifetime of the process."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._client = httpx.AsyncClient(timeout=httpx.Timeout(timeout), transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExtractionClient":
        return cls(settings.extraction_service_url, timeout=settings.extraction_timeout_seconds)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def extract(self, file_bytes: bytes, filename: str, schema: dict) -> dict:
        """Send the file and schema to the extraction service.

        Args:
            file_bytes: Raw uploaded document.
            filename: Original filename; its extension selects the part's content type.
            schema: Flat mapping of field name -> None.

        Returns:
            The service's filled flat map, verbatim. Values may be strings,
            numbers or null; keys may be missing.

        Raises:
            ExtractionFailure: on transport error, non-200 status, or a body
                that is not a JSON object.
        """
        files = {"file": (filename, file_bytes, get_mime_type(filename))}
        data = {"schema": json.dumps(schema)}

        logger.info("Sending extraction request to %s (file=%s, %d bytes)", self.base_url, filename, len(file_bytes))
        try:
            response = await self._client.post(self.base_url, files=files, data=data)
        except httpx.HTTPError as e:
            logger.error("Extraction request failed: %s", e)
            raise ExtractionFailure(f"Extraction server request failed: {e}") from e

        if response.status_code != 200:
            logger.error("Extraction server returned status %d", response.status_code)
            raise ExtractionFailure(
                f"Extraction server returned status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            result = response.json()
        except ValueError as e:
            raise ExtractionFailure(f"Failed to parse extraction response: {e}") from e

        if not isinstance(result, dict):
            raise ExtractionFailure(
                f"Extraction response was not a JSON object (got {type(result).__name__})"
            )

        return result
