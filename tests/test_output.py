"""Tests for output layer."""

import re
from datetime import date

import pytest

from calprint.exceptions import RenderError
from calprint.layout import build_month_grid, layout
from calprint.models.entry import DateEntry
from calprint.models.highlight import HighlightStyle
from calprint.output.pdf_writer import MonthPDFWriter, YearPDFWriter


def page_count(content: bytes) -> int:
    """Read the page count from the PDF page tree."""
    match = re.search(rb"/Count (\d+)\s+/Kids", content)
    assert match is not None
    return int(match.group(1))


@pytest.fixture
def grids(styles):
    entries = [
        DateEntry.from_key("2022-01-31.Mon", "away"),
        DateEntry.from_key("2022-02-01.Tue", "sick"),
        DateEntry.from_key("2022-02-02.Wed", ""),
        DateEntry.from_key("2023-03-01.Wed", "sick"),
    ]
    return layout(entries, styles)


def test_month_writer_one_page_per_month(grids, tmp_path):
    """Test MonthPDFWriter writes a valid PDF with a page per month."""
    path = tmp_path / "calendar.pdf"
    MonthPDFWriter().write(grids, path)

    content = path.read_bytes()
    assert content.startswith(b"%PDF")
    assert page_count(content) == 3


def test_year_writer_one_page_per_year(grids, tmp_path):
    """Test YearPDFWriter groups months onto a page per year."""
    path = tmp_path / "calendar.pdf"
    YearPDFWriter().write(grids, path)

    content = path.read_bytes()
    assert content.startswith(b"%PDF")
    assert page_count(content) == 2


def test_render_is_deterministic(grids):
    """Test identical grids render to identical bytes."""
    writer = MonthPDFWriter()
    assert writer.render(grids) == writer.render(grids)


def test_render_differs_with_highlight(styles):
    """Test highlight changes are reflected in the output."""
    plain = build_month_grid(2022, 2)
    highlighted = build_month_grid(2022, 2, {date(2022, 2, 1): styles["sick"]})
    writer = MonthPDFWriter()
    assert writer.render([plain]) != writer.render([highlighted])


def test_write_nothing_fails(tmp_path):
    """Test an empty grid list raises and writes no file."""
    path = tmp_path / "calendar.pdf"
    with pytest.raises(RenderError):
        MonthPDFWriter().write([], path)
    assert not path.exists()


def test_write_to_missing_directory(grids, tmp_path):
    """Test an unwritable path raises RenderError."""
    with pytest.raises(RenderError):
        MonthPDFWriter().write(grids, tmp_path / "missing" / "calendar.pdf")


def test_every_shape_renders(tmp_path):
    """Test both shapes draw without error."""
    styles = [
        HighlightStyle(name="c", shape="circle", colour=(0, 0, 0)),
        HighlightStyle(name="r", shape="rectangle", colour=(255, 255, 0)),
    ]
    grid = build_month_grid(
        2024, 2, {date(2024, 2, 28): styles[0], date(2024, 2, 29): styles[1]}
    )
    path = tmp_path / "shapes.pdf"
    MonthPDFWriter().write([grid], path)
    assert path.stat().st_size > 0


def test_writer_extension():
    """Test writers report the pdf extension."""
    assert MonthPDFWriter().get_extension() == "pdf"
    assert YearPDFWriter().get_extension() == "pdf"
