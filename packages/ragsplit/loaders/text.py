"""Plain text loader for local files and HTTP URLs."""

from __future__ import annotations

import asyncio
import codecs
import hashlib
import logging
from datetime import UTC, datetime
from pathlib import Path

import httpx

from ragsplit.dtos.document import Document, DocumentMetadata

from .base import BaseLoader, LoaderOptions
from .exceptions import DocumentTooLargeError, ExtractionFailedError, LoaderError, UnsupportedFormatError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

# BOM signatures in detection order (longer first to avoid UTF-16 matching UTF-32).
_BOM_ENCODINGS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
    (codecs.BOM_UTF8, "utf-8-sig"),
)


def _detect_bom(content: bytes) -> tuple[str, int] | None:
    """Detect BOM and return (encoding, bom_length) or None."""
    for bom, encoding in _BOM_ENCODINGS:
        if content.startswith(bom):
            return (encoding, len(bom))
    return None


def _is_binary_content(content: bytes) -> bool:
    """Check if content appears to be binary (BOM-aware).

    BOM-marked UTF-16/32 text is not binary even though it contains NUL bytes.
    """
    if _detect_bom(content) is not None:
        return False

    if b"\x00" in content:
        return True

    sample = content[:8192]
    if not sample:
        return False

    # Non-printable bytes, excluding tab, LF and CR
    non_printable = sum(1 for b in sample if b < 9 or (13 < b < 32))
    return (non_printable / len(sample)) > 0.30


def _generate_id(source: str) -> str:
    """Derive a document id from the source and the load time."""
    digest = hashlib.sha256(f"{source}{datetime.now(tz=UTC).isoformat()}".encode())
    return digest.hexdigest()[:32]


class TextLoader(BaseLoader):
    """Loader for plain text content.

    Local files are read off the event loop; URLs are fetched with httpx.

    Example:
        loader = TextLoader(LoaderOptions(max_size=10 * 1024 * 1024))
        document = await loader.load("notes/meeting.txt")
    """

    def __init__(
        self,
        options: LoaderOptions | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the loader.

        Args:
            options: Loader options
            http_client: Optional client used for URLs; a short-lived one is created per call otherwise
            timeout: Request timeout in seconds for the short-lived client
        """
        super().__init__(options)
        self._http_client = http_client
        self._timeout = timeout

    def decode(self, content: bytes, source: str | None = None, *, truncated: bool = False) -> str:
        """Decode raw bytes to text.

        BOM-marked UTF-8/16/32 content uses the BOM's encoding, everything else
        the configured encoding. When ``truncated`` is set, an incomplete
        character at the end of ``content`` is dropped instead of failing.

        Raises:
            UnsupportedFormatError: If content looks like binary.
            ExtractionFailedError: If decoding fails with strict error handling.
        """
        if _is_binary_content(content):
            raise UnsupportedFormatError("TextLoader cannot decode binary content", source=source)

        bom_info = _detect_bom(content)
        if bom_info is not None:
            encoding, bom_length = bom_info
            # utf-8-sig codec strips BOM automatically; UTF-16/32 need manual skip
            bytes_to_decode = content if encoding == "utf-8-sig" else content[bom_length:]
        else:
            encoding = self.options.encoding
            bytes_to_decode = content

        try:
            decoder = codecs.getincrementaldecoder(encoding)(errors=self.options.errors)
            return decoder.decode(bytes_to_decode, final=not truncated)
        except (UnicodeDecodeError, LookupError) as e:
            raise ExtractionFailedError(f"Failed to decode content: {e}", source=source, cause=e) from e

    async def load(self, source: str) -> Document:
        """Load a plain text file.

        Raises:
            LoaderError: If the file cannot be stat'ed or read.
            DocumentTooLargeError: If the file exceeds ``max_size``.
            UnsupportedFormatError: If the file looks binary.
        """
        path = Path(source)

        try:
            info = path.stat()
        except OSError as e:
            raise LoaderError(f"Failed to stat file: {e}", source=source, cause=e) from e

        max_size = self.options.max_size
        if max_size > 0 and info.st_size > max_size:
            raise DocumentTooLargeError(info.st_size, max_size, source=source)

        try:
            content = await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise LoaderError(f"Failed to read file: {e}", source=source, cause=e) from e

        abs_path = str(path.resolve())
        text = self.decode(content, source=abs_path)

        logger.debug("Loaded %s (%d bytes)", abs_path, len(content))

        return Document(
            id=_generate_id(abs_path),
            content=text,
            metadata=DocumentMetadata(
                source=abs_path,
                title=path.name,
                created_at=datetime.fromtimestamp(info.st_mtime, tz=UTC),
                extra=dict(self.options.metadata),
            ),
        )

    async def load_url(self, url: str) -> Document:
        """Fetch plain text from a URL.

        The body is streamed and reading stops after ``max_size`` bytes when a
        limit is set.

        Raises:
            LoaderError: If the request fails or the status is not 200.
            DocumentTooLargeError: If the declared Content-Length exceeds ``max_size``.
        """
        try:
            if self._http_client is not None:
                content, truncated = await self._fetch(self._http_client, url)
            else:
                async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
                    content, truncated = await self._fetch(client, url)
        except httpx.HTTPError as e:
            raise LoaderError(f"Failed to fetch URL: {e}", source=url, cause=e) from e

        text = self.decode(content, source=url, truncated=truncated)

        logger.debug("Fetched %s (%d bytes, truncated=%s)", url, len(content), truncated)

        return Document(
            id=_generate_id(url),
            content=text,
            metadata=DocumentMetadata(
                source=url,
                title=url,
                created_at=datetime.now(tz=UTC),
                extra=dict(self.options.metadata),
            ),
        )

    async def _fetch(self, client: httpx.AsyncClient, url: str) -> tuple[bytes, bool]:
        """Stream the body of ``url``; returns the bytes read and whether they were cut at ``max_size``."""
        max_size = self.options.max_size

        async with client.stream("GET", url) as response:
            if response.status_code != httpx.codes.OK:
                raise LoaderError(f"Unexpected status code: {response.status_code}", source=url)

            content_length = response.headers.get("content-length")
            if max_size > 0 and content_length is not None and content_length.isdigit():
                if int(content_length) > max_size:
                    raise DocumentTooLargeError(int(content_length), max_size, source=url)

            body = bytearray()
            async for chunk in response.aiter_bytes():
                body.extend(chunk)
                if max_size > 0 and len(body) > max_size:
                    del body[max_size:]
                    return bytes(body), True

        return bytes(body), False

    async def load_multiple(self, sources: list[str]) -> list[Document]:
        """Load files in order; the first failure fails the whole batch."""
        documents: list[Document] = []

        for source in sources:
            try:
                documents.append(await self.load(source))
            except LoaderError as e:
                logger.error("Failed to load %s: %s", source, e)
                raise

        return documents
