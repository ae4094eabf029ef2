"""Output layer for calendar documents."""

from calprint.output.base import DocumentWriter
from calprint.output.pdf_writer import MonthPDFWriter, PDFWriter, YearPDFWriter

__all__ = [
    "DocumentWriter",
    "MonthPDFWriter",
    "PDFWriter",
    "YearPDFWriter",
]
