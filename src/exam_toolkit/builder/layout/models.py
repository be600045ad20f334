"""
Module: builder.layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses representing text runs, placed lines, rules
    and pages. Coordinates are millimetres from the top-left corner.

Key Classes:
    - TextRun: Contiguous text in one style (plain or bold)
    - TextSpan: A run positioned at an x offset in a concrete font
    - LineKind: What produced a placed line
    - LinePlacement: One wrapped sub-line positioned on a page
    - RulePlacement: Horizontal separator line
    - PagePlan: Complete page layout
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.markup: Creates TextRuns
    - builder.layout.paginator: Creates PagePlans
    - builder.output.renderer: Draws PagePlans
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class TextRun:
    """
    Run of text sharing one style.

    Attributes:
        text: Run text (markers already removed)
        bold: Whether the run is emphasized
    """
    text: str
    bold: bool = False


@dataclass(frozen=True)
class TextSpan:
    """
    Run positioned on a line.

    Attributes:
        text: Text to draw
        x: Left edge (mm)
        width: Measured width (mm)
        font_name: Font to draw with
        font_size: Size in points
    """
    text: str
    x: float
    width: float
    font_name: str
    font_size: float

    @property
    def right(self) -> float:
        return self.x + self.width


class LineKind(str, Enum):
    """Source of a placed line."""

    BODY = "body"
    HEADING = "heading"
    TITLE = "title"


@dataclass(frozen=True)
class LinePlacement:
    """
    One wrapped sub-line positioned on a page.

    Attributes:
        spans: Styled spans, left to right
        top: Top of the line box (mm from page top)
        height: Line box height (mm)
        kind: What produced the line

    Example:
        >>> line = LinePlacement(spans=(span,), top=20.0, height=5.5)
        >>> line.bottom
        25.5
    """

    spans: tuple[TextSpan, ...]
    top: float
    height: float
    kind: LineKind = LineKind.BODY

    @property
    def bottom(self) -> float:
        """Bottom Y coordinate (top + height)."""
        return self.top + self.height

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)

    @property
    def left(self) -> float:
        return self.spans[0].x if self.spans else 0.0

    @property
    def right(self) -> float:
        return self.spans[-1].right if self.spans else 0.0

    @property
    def font_size(self) -> float:
        """Largest font size on the line (sets the baseline)."""
        return max((span.font_size for span in self.spans), default=0.0)


@dataclass(frozen=True)
class RulePlacement:
    """Horizontal line from x1 to x2 at y (mm), stroke width in points."""

    x1: float
    x2: float
    y: float
    line_width: float


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.

    Attributes:
        index: Page number (0-indexed)
        lines: Placed text lines in drawing order
        rules: Horizontal rules
        height_used: Cursor position at page end, relative to the top margin
    """

    index: int
    lines: tuple[LinePlacement, ...]
    rules: tuple[RulePlacement, ...] = ()
    height_used: float = 0.0

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        """Check if page has nothing drawn on it."""
        return not self.lines and not self.rules

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Tuple of PagePlans (never empty)
        warnings: Warning messages raised while laying out
        explicit_breaks: Page breaks caused by "---" lines
        automatic_breaks: Page breaks caused by running out of space

    Example:
        >>> result = paginate(content, measure, LayoutConfig())
        >>> result.page_count
        2
    """

    pages: tuple[PagePlan, ...]
    warnings: list[str] = field(default_factory=list)
    explicit_breaks: int = 0
    automatic_breaks: int = 0

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def total_lines(self) -> int:
        """Total number of placed lines across all pages."""
        return sum(p.line_count for p in self.pages)
