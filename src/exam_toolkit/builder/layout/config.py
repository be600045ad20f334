"""
Module: builder.layout.config

Purpose:
    Configuration for the text layout engine.
    Defines page size, margins, fonts, type sizes and vertical rhythm.
    All lengths are millimetres, measured from the top-left page corner.

Key Classes:
    - LayoutConfig: Immutable layout configuration
    - SeparatorStyle: How "---" lines are rendered

Dependencies:
    - dataclasses (std)
    - reportlab.lib.pagesizes: Standard page sizes

Used By:
    - builder.layout.paginator: Page arrangement
    - builder.output.renderer: Drawing
    - builder.output.backend: Page size and font registration
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional

from reportlab.lib.pagesizes import A4, LETTER
from reportlab.lib.units import mm

# Page sizes in millimetres (portrait)
PAGE_SIZES_MM = {
    "a4": (A4[0] / mm, A4[1] / mm),
    "letter": (LETTER[0] / mm, LETTER[1] / mm),
}

POINTS_PER_MM = mm


def pt_to_mm(value: float) -> float:
    """Convert a length in PDF points (1/72 inch) to millimetres."""
    return value / POINTS_PER_MM


class SeparatorStyle(str, Enum):
    """Rendering of a "---" content line."""

    PAGE_BREAK = "page_break"
    RULE = "rule"


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    Attributes:
        page_format: "a4" or "letter"
        margin_top: Top margin (mm)
        margin_bottom: Bottom margin (mm)
        margin_left: Left margin (mm)
        margin_right: Right margin (mm)
        font_name: Body font name
        bold_font_name: Bold font name
        font_path: Optional TTF file registered as font_name
        bold_font_path: Optional TTF file registered as bold_font_name
        body_font_size: Body text size (pt)
        heading_font_size: "# " heading size (pt)
        title_font_size: Document title size (pt)
        timestamp_font_size: Header timestamp size (pt)
        footer_font_size: Page footer size (pt)
        body_line_height: Height of one body sub-line (mm)
        heading_line_height: Height of one heading sub-line (mm)
        heading_spacing: Extra space after a heading (mm)
        paragraph_spacing: Extra space after each non-blank content line (mm)
        blank_line_height: Space for an empty content line (mm)
        option_indent: Indent for "A. ..." option lines (mm)
        separator_style: What "---" does (page break or horizontal rule)
        rule_spacing: Space above and below a rule (mm)
        rule_width: Rule stroke width (pt)
        include_header: Draw title header on the first page
        include_timestamp: Draw "Generated on" in the header
        header_rule_offset: Distance from top margin to the header rule (mm)
        header_height: Space reserved for the header (mm)
        show_footer: Draw "Page N of M" in the bottom margin

    Example:
        >>> config = LayoutConfig()
        >>> round(config.available_width)
        170
    """

    # Page
    page_format: str = "a4"

    # Margins
    margin_top: float = 20.0
    margin_bottom: float = 20.0
    margin_left: float = 20.0
    margin_right: float = 20.0

    # Fonts
    font_name: str = "Helvetica"
    bold_font_name: str = "Helvetica-Bold"
    font_path: Optional[str] = None
    bold_font_path: Optional[str] = None

    # Type sizes (pt)
    body_font_size: float = 11.0
    heading_font_size: float = 14.0
    title_font_size: float = 16.0
    timestamp_font_size: float = 10.0
    footer_font_size: float = 8.0

    # Vertical rhythm (mm)
    body_line_height: float = 5.5
    heading_line_height: float = 7.0
    heading_spacing: float = 3.0
    paragraph_spacing: float = 2.0
    blank_line_height: float = 3.0
    option_indent: float = 10.0

    # Separators
    separator_style: SeparatorStyle = SeparatorStyle.PAGE_BREAK
    rule_spacing: float = 5.0
    rule_width: float = 0.3

    # Header / footer
    include_header: bool = True
    include_timestamp: bool = True
    header_rule_offset: float = 10.0
    header_height: float = 20.0
    show_footer: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_format not in PAGE_SIZES_MM:
            raise ValueError(
                f"page_format must be one of {sorted(PAGE_SIZES_MM)}: {self.page_format!r}"
            )
        if not isinstance(self.separator_style, SeparatorStyle):
            try:
                object.__setattr__(self, "separator_style", SeparatorStyle(self.separator_style))
            except ValueError as e:
                raise ValueError(f"Unknown separator_style: {self.separator_style!r}") from e
        for name in ("margin_top", "margin_bottom", "margin_left", "margin_right"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative: {getattr(self, name)}")
        for name in (
            "body_font_size", "heading_font_size", "title_font_size",
            "timestamp_font_size", "footer_font_size",
            "body_line_height", "heading_line_height",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive: {getattr(self, name)}")
        if self.available_width <= self.option_indent:
            raise ValueError("Margins exceed page width")
        if self.available_height < self.header_height + self.heading_line_height:
            raise ValueError("Margins exceed page height")

    @property
    def page_width(self) -> float:
        return PAGE_SIZES_MM[self.page_format][0]

    @property
    def page_height(self) -> float:
        return PAGE_SIZES_MM[self.page_format][1]

    @property
    def available_width(self) -> float:
        """Width available for content (excluding margins)."""
        return self.page_width - self.margin_left - self.margin_right

    @property
    def available_height(self) -> float:
        """Height available for content (excluding margins)."""
        return self.page_height - self.margin_top - self.margin_bottom

    @property
    def content_bottom(self) -> float:
        """Lowest y a line may reach before a new page is needed."""
        return self.page_height - self.margin_bottom

    @property
    def content_right(self) -> float:
        return self.page_width - self.margin_right

    def to_dict(self) -> dict:
        d = asdict(self)
        d["separator_style"] = self.separator_style.value
        return d
