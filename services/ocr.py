"""
OCR Service

Thin adapter over Tesseract (via pytesseract) that turns an invoice image
into plain text, plus the extraction step that parses that text.
"""

import logging

import pytesseract

from .invoice import parse_invoice_text

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = 'eng'


class OCRError(Exception):
    """Raised when text recognition fails."""
    pass


def configure(tesseract_cmd=None):
    """Point pytesseract at a specific tesseract binary."""
    if tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = tesseract_cmd


def recognize_text(image, lang=DEFAULT_LANGUAGE):
    """
    Run OCR over an image.

    Args:
        image: PIL image (see utils.image_handler.load_invoice_image)
        lang: Tesseract language code

    Returns:
        Recognized text

    Raises:
        OCRError: If tesseract is missing or fails on the image
    """
    try:
        # psm 6: treat the page as a single block of text, keeps invoice rows intact
        return pytesseract.image_to_string(image, lang=lang, config='--psm 6')
    except pytesseract.TesseractNotFoundError as e:
        logger.error("Tesseract is not installed or not on PATH")
        raise OCRError("OCR engine is not available") from e
    except (pytesseract.TesseractError, RuntimeError) as e:
        logger.warning("OCR failed: %s", e)
        raise OCRError(f"Failed to extract text from invoice: {e}") from e


def extract_line_items(image, lang=DEFAULT_LANGUAGE):
    """
    Recognize an invoice image and parse its line items.

    Returns:
        (text, items) tuple
    """
    text = recognize_text(image, lang=lang)
    items = parse_invoice_text(text)
    logger.info("Extracted %d line items from %d characters of OCR text", len(items), len(text))
    return text, items
