# backend/resume_ats/utils.py
# Turns an uploaded resume (PDF, DOCX or plain text) into plain text.
import io
import logging
import os
from typing import Optional

from PyPDF2 import PdfReader
from docx import Document

logger = logging.getLogger(__name__)

PDF_TYPES = {"application/pdf"}
DOCX_TYPES = {"application/vnd.openxmlformats-officedocument.wordprocessingml.document"}


def extract_text_from_pdf(content: bytes) -> str:
    reader = PdfReader(io.BytesIO(content))
    text_parts = []
    for page in reader.pages:
        t = page.extract_text()
        if t:
            text_parts.append(t)
    return "\n".join(text_parts)


def extract_text_from_docx(content: bytes) -> str:
    doc = Document(io.BytesIO(content))
    return "\n".join(p.text for p in doc.paragraphs)


def extract_text(filename: str, content: bytes, content_type: Optional[str] = None) -> str:
    """
    Best-effort text extraction. Unreadable files give "" so the scorer
    still runs (and reports everything missing).
    """
    ext = os.path.splitext(filename or "")[1].lower()
    try:
        if ext == ".pdf" or content_type in PDF_TYPES:
            return extract_text_from_pdf(content)
        if ext == ".docx" or content_type in DOCX_TYPES:
            return extract_text_from_docx(content)
        return content.decode("utf-8", errors="ignore")
    except Exception:
        logger.exception("[extract_text] failed to read %s", filename)
        return ""
