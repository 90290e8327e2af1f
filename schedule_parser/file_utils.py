# -*- coding: utf-8 -*-
import base64
import binascii
import io
import logging
import typing as t
from pathlib import Path
from urllib.parse import unquote, urlparse

import pdfplumber
import requests

from .models import PDF_MIME_TYPE


logger = logging.getLogger(__name__)

DOWNLOAD_TIMEOUT = 30.0


def _is_url(path_or_url: str) -> bool:
    return path_or_url.startswith('http://') or path_or_url.startswith('https://')


def _read_source(path_or_url: str) -> tuple[bytes, str, t.Optional[str]]:
    """
    Loads a schedule file from a local path or a URL.
    :param path_or_url: A local file path or a URL.
    :return: The raw bytes, a file name and the content type if the server sent one.
    """
    if _is_url(path_or_url):
        response = requests.get(path_or_url, timeout=DOWNLOAD_TIMEOUT)
        response.raise_for_status()
        name = Path(unquote(urlparse(path_or_url).path)).name or "schedule"
        content_type = response.headers.get("Content-Type", "").split(";")[0].strip() or None
        return response.content, name, content_type

    path = Path(path_or_url)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_bytes(), path.name, None


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """
    Extracts the text layer of a PDF. Scanned pages without text yield nothing.
    :param pdf_bytes: The PDF file contents.
    :return: The text of all pages, separated by blank lines.
    """
    pages: list[str] = []
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        for page in pdf.pages:
            text = page.extract_text()
            if text:
                pages.append(text.strip())
    return "\n\n".join(pages)


def pdf_text_from_base64(file_base64: str) -> str:
    """Best-effort text layer for a base64 PDF; empty string if it can't be read."""
    try:
        pdf_bytes = base64.b64decode(file_base64, validate=True)
    except (binascii.Error, ValueError) as exc:
        logger.warning("PDF payload is not valid base64: %s", exc)
        return ""
    try:
        return extract_pdf_text(pdf_bytes)
    except Exception as exc:  # pdfminer errors share no common base class
        logger.warning("Could not read PDF text layer: %s", exc)
        return ""


def load_upload(path_or_url: str) -> dict[str, str]:
    """
    Builds a parse request body from a local file or URL.

    PDFs are sent inline for the extraction model, with their text layer as
    fileContent so the heuristic parser still has something to read.
    :param path_or_url: A local file path or a URL.
    :return: A dict with fileContent, fileName and, for PDFs, fileType and fileBase64.
    """
    data, name, content_type = _read_source(path_or_url)

    if content_type == PDF_MIME_TYPE or name.lower().endswith(".pdf"):
        return {
            "fileContent": extract_pdf_text(data),
            "fileName": name,
            "fileType": PDF_MIME_TYPE,
            "fileBase64": base64.b64encode(data).decode("utf-8"),
        }

    body = {
        "fileContent": data.decode("utf-8", errors="replace"),
        "fileName": name,
    }
    if content_type:
        body["fileType"] = content_type
    return body
