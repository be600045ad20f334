"""
Module: builder.output.renderer

Purpose:
    Draw a LayoutResult onto a PdfBackend.
    Each PagePlan becomes one PDF page with its text spans and rules
    drawn at the positions the paginator chose.

Key Functions:
    - render_layout(): Main rendering function

Dependencies:
    - builder.output.backend: PdfBackend
    - builder.layout: LayoutConfig, LayoutResult, PagePlan

Used By:
    - builder.controller: generate_pdf()
"""

from __future__ import annotations

import logging

from exam_toolkit.builder.layout.config import LayoutConfig, pt_to_mm
from exam_toolkit.builder.layout.models import LayoutResult, LinePlacement, PagePlan

from .backend import PdfBackend

logger = logging.getLogger(__name__)


def render_layout(layout: LayoutResult, backend: PdfBackend, config: LayoutConfig) -> None:
    """
    Render every page of a layout onto the backend.

    The backend starts on its first page; new_page() is called between
    pages, so the backend ends up with exactly layout.page_count pages.
    The caller is responsible for backend.finish().

    Args:
        layout: Result from paginate()
        backend: Drawing surface
        config: Layout configuration (fonts and footer settings)

    Example:
        >>> backend = ReportLabBackend(config)
        >>> render_layout(paginate(content, backend.string_width, config), backend, config)
        >>> pdf_bytes = backend.finish()
    """
    total = layout.page_count
    for page in layout.pages:
        if page.index > 0:
            backend.new_page()
        _render_page(backend, page)
        if config.show_footer:
            _draw_footer(backend, page.index + 1, total, config)

    logger.debug(f"Rendered {total} pages")


def _render_page(backend: PdfBackend, page: PagePlan) -> None:
    """Draw the rules and text lines of one page."""
    for rule in page.rules:
        backend.draw_line(rule.x1, rule.y, rule.x2, rule.y, rule.line_width)

    for line in page.lines:
        _draw_line(backend, line)


def _draw_line(backend: PdfBackend, line: LinePlacement) -> None:
    """
    Draw one placed sub-line.

    All spans share a baseline set by the largest font on the line.
    """
    baseline = line.top + pt_to_mm(line.font_size)
    for span in line.spans:
        if not span.text:
            continue
        backend.draw_string(span.x, baseline, span.text, span.font_name, span.font_size)


def _draw_footer(backend: PdfBackend, page_number: int, total: int, config: LayoutConfig) -> None:
    """
    Draw centered "Page N of M" in the bottom margin.

    Positioned halfway into the bottom margin, below every content line.
    """
    text = f"Page {page_number} of {total}"
    width = backend.string_width(text, config.font_name, config.footer_font_size)
    x = (config.page_width - width) / 2
    y = config.page_height - config.margin_bottom / 2
    backend.draw_string(x, y, text, config.font_name, config.footer_font_size)
