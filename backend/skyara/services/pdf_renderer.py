"""PDF rendering service — lays a FeasibilityReport out on A4 pages."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import fitz  # type: ignore[import-untyped]

from skyara.exceptions import ReportRenderingError

if TYPE_CHECKING:
    from pathlib import Path

    from skyara.report import FeasibilityReport, ReportSection

logger = logging.getLogger(__name__)

_PAGE_WIDTH = 595  # A4, points
_PAGE_HEIGHT = 842
_MARGIN = 40
_FONT = "helv"
_FONT_BOLD = "hebo"

_TEAL = (13 / 255, 148 / 255, 136 / 255)
_GREY = (0.4, 0.4, 0.4)
_BLACK = (0.0, 0.0, 0.0)

# Base-14 fonts only cover Latin-1
_LATIN1_FALLBACKS = str.maketrans({"œ": "oe", "Œ": "OE"})


class _PageWriter:
    """Writes lines top to bottom, opening a new page when the current one is full."""

    def __init__(self, doc: fitz.Document) -> None:
        self._doc = doc
        self._page: fitz.Page = doc.new_page(width=_PAGE_WIDTH, height=_PAGE_HEIGHT)
        self._y: float = _MARGIN

    def _advance(self, height: float) -> None:
        if self._y + height > _PAGE_HEIGHT - _MARGIN:
            self._page = self._doc.new_page(width=_PAGE_WIDTH, height=_PAGE_HEIGHT)
            self._y = _MARGIN
        self._y += height

    def _insert(
        self,
        x: float,
        text: str,
        size: float,
        bold: bool,
        color: tuple[float, float, float],
    ) -> None:
        self._page.insert_text(
            (x, self._y),
            text.translate(_LATIN1_FALLBACKS),
            fontsize=size,
            fontname=_FONT_BOLD if bold else _FONT,
            color=color,
        )

    def line(
        self,
        text: str,
        size: float = 10,
        bold: bool = False,
        color: tuple[float, float, float] = _BLACK,
    ) -> None:
        self._advance(size * 1.5)
        self._insert(_MARGIN, text, size, bold, color)

    def row(self, cells: list[str], size: float = 9, bold: bool = False) -> None:
        self._advance(size * 1.6)
        width = (_PAGE_WIDTH - 2 * _MARGIN) / len(cells)
        for i, cell in enumerate(cells):
            self._insert(_MARGIN + i * width, cell, size, bold, _BLACK)

    def rule(self) -> None:
        self._advance(4)
        self._page.draw_line(
            fitz.Point(_MARGIN, self._y),
            fitz.Point(_PAGE_WIDTH - _MARGIN, self._y),
            color=_TEAL,
            width=0.5,
        )

    def gap(self, height: float = 8) -> None:
        self._advance(height)


def _write_section(writer: _PageWriter, section: ReportSection) -> None:
    writer.gap(10)
    writer.line(section.title, size=14, bold=True)
    if section.table is not None:
        writer.row(section.table.headers, bold=True)
        writer.rule()
        for row in section.table.rows:
            writer.row(row)
    for label, value in section.items:
        emphasized = label.isupper()
        writer.line(
            f"{label}: {value}",
            size=12 if emphasized else 11,
            bold=emphasized,
            color=_TEAL if emphasized else _BLACK,
        )
    if section.note:
        writer.gap()
        writer.line(section.note, size=8, color=_GREY)


def _number_pages(doc: fitz.Document) -> None:
    total = doc.page_count
    for index, page in enumerate(doc):
        page.insert_text(
            (_PAGE_WIDTH - _MARGIN - 40, _PAGE_HEIGHT - 20),
            f"Page {index + 1}/{total}",
            fontsize=8,
            fontname=_FONT,
            color=_GREY,
        )


def render_pdf(report: FeasibilityReport) -> bytes:
    """Render *report* to PDF bytes.

    Raises
    ------
    ReportRenderingError
        If PyMuPDF fails to lay out or serialize the document.
    """
    doc = fitz.open()
    try:
        writer = _PageWriter(doc)
        writer.line(report.title, size=20, bold=True, color=_TEAL)
        writer.line(f"Date: {report.generated_on.strftime('%d/%m/%Y')}", size=10, color=_GREY)
        for header in report.header_lines:
            writer.line(header, size=10, color=_GREY)
        for section in report.sections:
            _write_section(writer, section)
        _number_pages(doc)
        page_count = doc.page_count
        data: bytes = doc.tobytes()
    except RuntimeError as exc:
        msg = f"Failed to render report '{report.title}'"
        raise ReportRenderingError(msg) from exc
    finally:
        doc.close()

    logger.info("Rendered feasibility report: %d page(s), %d bytes", page_count, len(data))
    return data


def save_pdf(report: FeasibilityReport, path: Path) -> Path:
    """Render *report* and write it to *path*."""
    path.write_bytes(render_pdf(report))
    return path
