"""
Document Processing Utility

Handles CV files uploaded for review without being saved as a CV first:
- PDF (text extraction via PyPDF2)
- TXT (UTF-8 decode)
- DOC/DOCX (lossy decode fallback, no structured parsing)

Validation against the accepted types and the 5MB limit is advisory: problems
are logged as warnings and never block a review. The core only needs a document
to be present.
"""

import io
from dataclasses import dataclass
from pathlib import Path
from typing import List

import PyPDF2

from constants import Messages, UploadLimits
from storage.logs_manager import LogsManager


@dataclass
class UploadedDocument:
    """An opaque uploaded file handed over by the caller."""
    filename: str
    content: bytes

    @property
    def extension(self) -> str:
        return Path(self.filename).suffix.lower()

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_path(cls, path: str | Path) -> "UploadedDocument":
        path = Path(path)
        return cls(filename=path.name, content=path.read_bytes())


class DocumentProcessor:
    def __init__(self, logs_manager: LogsManager):
        """
        Args:
            logs_manager (LogsManager): Instance of LogsManager for async logging
        """
        self.logs_manager = logs_manager

    @staticmethod
    def validation_warnings(document: UploadedDocument) -> List[str]:
        """Return human-readable problems with the upload (empty list if none)."""
        problems = []
        if document.extension not in UploadLimits.ACCEPTED_EXTENSIONS:
            problems.append(Messages.UPLOAD_UNSUPPORTED.format(
                document.filename, ", ".join(UploadLimits.ACCEPTED_EXTENSIONS)
            ))
        if document.size == 0:
            problems.append(Messages.UPLOAD_EMPTY.format(document.filename))
        elif document.size > UploadLimits.MAX_SIZE_BYTES:
            problems.append(Messages.UPLOAD_TOO_LARGE.format(
                document.filename, document.size, UploadLimits.MAX_SIZE_BYTES
            ))
        return problems

    async def check_upload(self, document: UploadedDocument) -> bool:
        """Log advisory validation problems. Returns True if the upload looks fine."""
        problems = self.validation_warnings(document)
        for problem in problems:
            await self.logs_manager.warning(problem)
        return not problems

    async def extract_text(self, document: UploadedDocument) -> str:
        """
        Extract text content from an uploaded document.

        Returns:
            str: Extracted text, or an empty string if nothing could be read
        """
        await self.logs_manager.debug(
            f"Extracting text from upload: {document.filename} ({document.size} bytes)"
        )
        if document.extension == ".pdf":
            return await self._extract_pdf_text(document)
        return document.content.decode("utf-8", errors="replace").strip()

    async def _extract_pdf_text(self, document: UploadedDocument) -> str:
        try:
            reader = PyPDF2.PdfReader(io.BytesIO(document.content))
            pages = [page.extract_text() or "" for page in reader.pages]
        except Exception as e:
            await self.logs_manager.warning(
                f"Could not read PDF text from {document.filename}: {str(e)}"
            )
            return ""

        text = "\n".join(pages).strip()
        if not text:
            await self.logs_manager.warning(f"No text content found in PDF: {document.filename}")
        else:
            await self.logs_manager.debug(
                f"Extracted {len(text)} characters from PDF: {document.filename}"
            )
        return text
