"""PDF writers for month grids.

Geometry is measured in ReportLab points from the top-left corner of the
page and flipped to PDF coordinates (origin bottom-left) when drawing.
"""

import io
import logging
from collections import defaultdict
from pathlib import Path
from typing import Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen.canvas import Canvas

from calprint.constants import GRID_COLUMNS, GRID_ROWS, WEEKDAY_NAMES
from calprint.exceptions import RenderError
from calprint.layout import build_month_grid
from calprint.models.grid import GridCell, MonthGrid
from calprint.models.highlight import Shape

logger = logging.getLogger(__name__)

HEADER_BG = colors.Color(46 / 255, 117 / 255, 181 / 255)
HEADER_TEXT = colors.white
TEXT = colors.black
GRID_LINES = colors.HexColor("#BDC3C7")

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
FONT_ITALIC = "Helvetica-Oblique"

# Circle radius as a fraction of the smaller cell side
CIRCLE_RATIO = 0.38
# Rectangles overlap neighbours slightly so no hairline gaps show in print
RECT_OVERLAP = 0.1 * mm


def _fill_colour(rgb: tuple[int, int, int]) -> colors.Color:
    r, g, b = rgb
    return colors.Color(r / 255, g / 255, b / 255)


class _Page:
    """Canvas wrapper drawing with top-down coordinates."""

    def __init__(self, canvas: Canvas, height: float):
        self.canvas = canvas
        self.height = height

    def rect(self, left: float, top: float, width: float, height: float, colour) -> None:
        self.canvas.setFillColor(colour)
        self.canvas.rect(left, self.height - top - height, width, height, stroke=0, fill=1)

    def circle(self, x: float, y: float, radius: float, colour) -> None:
        self.canvas.setFillColor(colour)
        self.canvas.circle(x, self.height - y, radius, stroke=0, fill=1)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.canvas.line(x1, self.height - y1, x2, self.height - y2)

    def text(self, x: float, middle: float, content: str, font: str, size: float, colour) -> None:
        """Draw text centred on x and vertically centred on middle."""
        self.canvas.setFillColor(colour)
        self.canvas.setFont(font, size)
        baseline = middle + size * 0.35
        self.canvas.drawCentredString(x, self.height - baseline, content)


def draw_month(
    page: _Page,
    grid: MonthGrid,
    left: float,
    top: float,
    width: float,
    height: float,
    title: str,
    title_size: float,
    label_size: float,
    day_size: float,
    weekday_labels: Sequence[str] = WEEKDAY_NAMES,
    grid_lines: bool = True,
) -> None:
    """
    Draw one month block: title band, weekday header and the 6x7 day grid.

    Args:
        page: Page to draw on
        grid: Month grid to draw
        left, top, width, height: Block bounds in points, top-down
        title: Text for the title band
        title_size, label_size, day_size: Font sizes in points
        weekday_labels: Column headers, Monday first
        grid_lines: Draw thin cell borders
    """
    band_height = title_size * 1.8
    page.rect(left, top, width, band_height, HEADER_BG)
    page.text(left + width / 2, top + band_height / 2, title, FONT_BOLD, title_size, HEADER_TEXT)

    col_width = width / GRID_COLUMNS
    label_height = label_size * 2.2
    label_top = top + band_height
    for col, label in enumerate(weekday_labels):
        x = left + col_width * col + col_width / 2
        page.text(x, label_top + label_height / 2, label, FONT_ITALIC, label_size, TEXT)

    grid_top = label_top + label_height
    row_height = (top + height - grid_top) / GRID_ROWS

    for row, col, cell in grid.cells():
        if cell is None or cell.highlight is None:
            continue
        _draw_highlight(page, cell, left + col_width * col, grid_top + row_height * row, col_width, row_height)

    if grid_lines:
        page.canvas.setStrokeColor(GRID_LINES)
        page.canvas.setLineWidth(0.5)
        for row in range(GRID_ROWS + 1):
            y = grid_top + row_height * row
            page.line(left, y, left + width, y)
        for col in range(GRID_COLUMNS + 1):
            x = left + col_width * col
            page.line(x, grid_top, x, grid_top + row_height * GRID_ROWS)

    for row, col, cell in grid.cells():
        if cell is None:
            continue
        x = left + col_width * col + col_width / 2
        y = grid_top + row_height * row + row_height / 2
        page.text(x, y, str(cell.day), FONT_REGULAR, day_size, TEXT)


def _draw_highlight(
    page: _Page, cell: GridCell, left: float, top: float, width: float, height: float
) -> None:
    colour = _fill_colour(cell.highlight.colour)
    if cell.highlight.shape == Shape.CIRCLE:
        radius = min(width, height) * CIRCLE_RATIO
        page.circle(left + width / 2, top + height / 2, radius, colour)
    elif cell.highlight.shape == Shape.RECTANGLE:
        page.rect(left, top, width + RECT_OVERLAP, height + RECT_OVERLAP, colour)
    else:
        raise RenderError(f"Cannot draw shape: {cell.highlight.shape}")


class PDFWriter:
    """Base for PDF writers: render pages in memory, then write one file."""

    page_size = A4
    title = "Calendar"

    def write(self, grids: Sequence[MonthGrid], path: Path) -> None:
        """Render grids and write the PDF to path.

        Raises:
            RenderError: If there is nothing to render or the file cannot be written
        """
        if not grids:
            raise RenderError("Nothing to render: the calendar has no dated entries")

        content = self.render(grids)

        try:
            with open(path, "wb") as f:
                f.write(content)

            # Verify file was written
            if path.stat().st_size == 0:
                raise RenderError(f"File was created but is empty: {path}")
        except OSError as e:
            self._remove_partial(path)
            raise RenderError(f"Failed to write {path}: {e}") from e
        except RenderError:
            self._remove_partial(path)
            raise

        logger.info(f"Wrote {path} ({len(content)} bytes)")

    def render(self, grids: Sequence[MonthGrid]) -> bytes:
        """Render grids to PDF bytes; identical input gives identical bytes."""
        buffer = io.BytesIO()
        canvas = Canvas(buffer, pagesize=self.page_size, invariant=1)
        canvas.setTitle(self.title)
        canvas.setCreator("calprint")

        pages = self.draw_pages(canvas, grids)
        canvas.save()
        logger.debug(f"Rendered {pages} page(s)")
        return buffer.getvalue()

    def draw_pages(self, canvas: Canvas, grids: Sequence[MonthGrid]) -> int:
        """Draw all pages on the canvas and return the page count."""
        raise NotImplementedError

    def get_extension(self) -> str:
        """Returns file extension."""
        return "pdf"

    @staticmethod
    def _remove_partial(path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError:
            logger.warning(f"Could not remove partial output {path}")


class MonthPDFWriter(PDFWriter):
    """One page per month."""

    margin = 15 * mm

    def draw_pages(self, canvas: Canvas, grids: Sequence[MonthGrid]) -> int:
        width, height = self.page_size
        page = _Page(canvas, height)
        for grid in grids:
            draw_month(
                page,
                grid,
                left=self.margin,
                top=self.margin,
                width=width - 2 * self.margin,
                height=height - 2 * self.margin,
                title=grid.title,
                title_size=28,
                label_size=14,
                day_size=20,
            )
            canvas.showPage()
        return len(grids)


class YearPDFWriter(PDFWriter):
    """One page per year with twelve months in a 3x4 arrangement.

    Months of a rendered year that have no entries are drawn without
    highlights.
    """

    columns = 3
    rows = 4
    x_margin = 10 * mm
    x_sep = 10 * mm
    title_vpad = 14 * mm
    title_size = 36
    row_sep = 6 * mm

    def draw_pages(self, canvas: Canvas, grids: Sequence[MonthGrid]) -> int:
        width, height = self.page_size
        page = _Page(canvas, height)

        by_year: dict[int, dict[int, MonthGrid]] = defaultdict(dict)
        for grid in grids:
            by_year[grid.year][grid.month] = grid

        for year in sorted(by_year):
            title_height = self.title_size * 0.75
            page.text(
                width / 2,
                self.title_vpad + title_height / 2,
                str(year),
                FONT_BOLD,
                self.title_size,
                TEXT,
            )

            top_margin = self.title_vpad * 2 + title_height
            col_width = (width - self.x_margin * 2 - self.x_sep * (self.columns - 1)) / self.columns
            row_height = (height - top_margin - self.title_vpad) / self.rows

            for index in range(12):
                month = index + 1
                grid = by_year[year].get(month) or build_month_grid(year, month)
                row, col = divmod(index, self.columns)
                draw_month(
                    page,
                    grid,
                    left=self.x_margin + (col_width + self.x_sep) * col,
                    top=top_margin + row_height * row,
                    width=col_width,
                    height=row_height - self.row_sep,
                    title=grid.month_name,
                    title_size=12,
                    label_size=9,
                    day_size=9,
                    weekday_labels=[name[0] for name in WEEKDAY_NAMES],
                    grid_lines=False,
                )
            canvas.showPage()
        return len(by_year)
