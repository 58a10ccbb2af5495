"""Parsing of Google document links attached to a campaign."""

import re

# Checked in order; the first pattern that matches wins
DOCUMENT_ID_PATTERNS = [
    re.compile(r"/presentation/d/([a-zA-Z0-9_-]+)"),  # Slides
    re.compile(r"/document/d/([a-zA-Z0-9_-]+)"),  # Docs
    re.compile(r"/spreadsheets/d/([a-zA-Z0-9_-]+)"),  # Sheets
    re.compile(r"/drawings/d/([a-zA-Z0-9_-]+)"),  # Drawings
    re.compile(r"/file/d/([a-zA-Z0-9_-]+)"),  # generic Drive file
    re.compile(r"/d/([a-zA-Z0-9_-]+)"),
    re.compile(r"id=([a-zA-Z0-9_-]+)"),
]


def extract_document_id(url: str) -> str | None:
    """Extract the document id from a Google Docs/Slides/Sheets/Drive URL.

    Examples:
        extract_document_id("https://docs.google.com/document/d/1AbC_x-9/edit") -> "1AbC_x-9"
        extract_document_id("https://drive.google.com/open?id=1XyZ") -> "1XyZ"
        extract_document_id("https://example.com/page") -> None
    """
    for pattern in DOCUMENT_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def get_link_type(url: str) -> str:
    """Human-readable kind of a Google link, used in exported file names."""
    if "/document/" in url:
        return "Google Doc"
    if "/presentation/" in url:
        return "Google Slides"
    if "/spreadsheets/" in url:
        return "Google Sheets"
    if "/forms/" in url:
        return "Google Form"
    return "Google Link"


def exported_pdf_name(link_type: str, document_id: str) -> str:
    """Name of the PDF copy stored in the Data folder."""
    return f"Copy - {link_type} - {document_id[:8]}.pdf"
