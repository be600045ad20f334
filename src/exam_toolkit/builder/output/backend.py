"""
Module: builder.output.backend

Purpose:
    Abstract drawing surface for PDF rendering.
    The renderer and paginator only talk to a PdfBackend, so the
    concrete PDF library can be swapped (or faked in tests).

Key Classes:
    - PdfBackend: Abstract base class for drawing primitives
    - ReportLabBackend: PdfBackend over a reportlab Canvas held in memory
    - BackendUnavailableError: Backend or fonts cannot be set up here

Coordinates:
    All positions are millimetres measured from the top-left corner of the
    page (y grows downwards). Font sizes and stroke widths are points.

Dependencies:
    - reportlab: PDF generation, font metrics, TTF registration
    - builder.layout.config: LayoutConfig

Used By:
    - builder.controller: generate_pdf()
    - builder.output.renderer: render_layout()
"""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from exam_toolkit.builder.layout.config import LayoutConfig

logger = logging.getLogger(__name__)


class BackendUnavailableError(Exception):
    """PDF backend or its fonts cannot be initialised in this environment."""
    pass


class PdfBackend(ABC):
    """
    Abstract drawing surface.

    One instance renders one document; the first page exists on creation
    and new_page() starts each following page.
    """

    @property
    @abstractmethod
    def page_size(self) -> Tuple[float, float]:
        """(width, height) of each page in mm."""

    @abstractmethod
    def string_width(self, text: str, font_name: str, font_size: float) -> float:
        """
        Measure text.

        Args:
            text: Text to measure
            font_name: Registered font name
            font_size: Size in points

        Returns:
            Width in mm
        """

    @abstractmethod
    def draw_string(self, x: float, y: float, text: str, font_name: str, font_size: float) -> None:
        """Draw text with its baseline at (x, y) mm from the top-left."""

    @abstractmethod
    def draw_line(self, x1: float, y1: float, x2: float, y2: float, line_width: float) -> None:
        """Stroke a straight line between two points (mm), width in points."""

    @abstractmethod
    def new_page(self) -> None:
        """Finish the current page and start a new one."""

    @abstractmethod
    def finish(self) -> bytes:
        """Close the document and return the PDF bytes."""


class ReportLabBackend(PdfBackend):
    """
    PdfBackend drawing on a reportlab Canvas backed by an in-memory buffer.

    Standard PDF fonts (Helvetica family) need no setup. When the config
    names TTF files, they are registered under config.font_name and
    config.bold_font_name.

    Example:
        >>> backend = ReportLabBackend(LayoutConfig())
        >>> backend.draw_string(20, 30, "Hello", "Helvetica", 11)
        >>> pdf_bytes = backend.finish()
    """

    def __init__(self, config: LayoutConfig) -> None:
        self._config = config
        _ensure_font(config.font_name, config.font_path)
        _ensure_font(config.bold_font_name, config.bold_font_path)

        self._width_pt = config.page_width * mm
        self._height_pt = config.page_height * mm
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(
            self._buffer,
            pagesize=(self._width_pt, self._height_pt),
        )
        self._finished = False

    @property
    def page_size(self) -> Tuple[float, float]:
        return (self._config.page_width, self._config.page_height)

    def string_width(self, text: str, font_name: str, font_size: float) -> float:
        return pdfmetrics.stringWidth(text, font_name, font_size) / mm

    def draw_string(self, x: float, y: float, text: str, font_name: str, font_size: float) -> None:
        self._canvas.setFont(font_name, font_size)
        self._canvas.drawString(x * mm, self._transform_y(y), text)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, line_width: float) -> None:
        self._canvas.saveState()
        self._canvas.setLineWidth(line_width)
        self._canvas.line(x1 * mm, self._transform_y(y1), x2 * mm, self._transform_y(y2))
        self._canvas.restoreState()

    def new_page(self) -> None:
        self._canvas.showPage()

    def finish(self) -> bytes:
        if not self._finished:
            self._canvas.showPage()
            self._canvas.save()
            self._finished = True
        return self._buffer.getvalue()

    def _transform_y(self, y_mm: float) -> float:
        """Convert top-down mm to bottom-up PDF points."""
        return self._height_pt - y_mm * mm


def _ensure_font(font_name: str, font_path: Optional[str]) -> None:
    """
    Make font_name available to reportlab.

    Raises:
        BackendUnavailableError: If the TTF cannot be registered or the
            font name is unknown
    """
    if font_path is not None:
        if font_name in pdfmetrics.getRegisteredFontNames():
            return
        try:
            pdfmetrics.registerFont(TTFont(font_name, str(font_path)))
        except Exception as e:
            raise BackendUnavailableError(
                f"Cannot register font {font_name!r} from {font_path}: {e}"
            ) from e
        logger.debug(f"Registered TTF font {font_name} from {font_path}")
        return

    try:
        pdfmetrics.getFont(font_name)
    except Exception as e:
        raise BackendUnavailableError(f"Font {font_name!r} is not available: {e}") from e
