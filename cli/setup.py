"""CLI setup functions for document writers."""

from enum import Enum

from calprint.constants import LAYOUT_MONTH, LAYOUT_YEAR
from calprint.exceptions import RenderError
from calprint.output.base import DocumentWriter
from calprint.output.pdf_writer import MonthPDFWriter, YearPDFWriter


class PageLayout(str, Enum):
    """Page layout choices for the rendered document."""

    MONTH = LAYOUT_MONTH
    YEAR = LAYOUT_YEAR


def setup_writer(layout: str) -> DocumentWriter:
    """Get writer for page layout."""
    if layout == LAYOUT_MONTH:
        return MonthPDFWriter()
    elif layout == LAYOUT_YEAR:
        return YearPDFWriter()
    else:
        raise RenderError(f"Unsupported page layout: {layout}")
