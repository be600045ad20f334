"""
Module: builder.layout

Purpose:
    Text layout for Document content.
    Converts the markdown-like content string into positioned page plans.

Key Functions:
    - paginate(): Arrange content onto pages
    - wrap_runs(): Word-wrap styled runs
    - split_runs(): Parse **bold** markers

Key Classes:
    - LayoutConfig: Page geometry, fonts and spacing
    - LinePlacement, RulePlacement: Positioned content
    - PagePlan: Single page layout plan
    - LayoutResult: All pages plus diagnostics

Used By:
    - builder.controller: generate_pdf()
    - builder.output.renderer: Drawing
"""

from .config import LayoutConfig, SeparatorStyle, PAGE_SIZES_MM, pt_to_mm
from .models import (
    TextRun,
    TextSpan,
    LineKind,
    LinePlacement,
    RulePlacement,
    PagePlan,
    LayoutResult,
)
from .markup import ContentLineType, classify_line, split_lines, split_runs
from .wrapping import Measure, wrap_runs
from .paginator import paginate

__all__ = [
    # Config
    "LayoutConfig",
    "SeparatorStyle",
    "PAGE_SIZES_MM",
    "pt_to_mm",
    # Models
    "TextRun",
    "TextSpan",
    "LineKind",
    "LinePlacement",
    "RulePlacement",
    "PagePlan",
    "LayoutResult",
    # Functions
    "ContentLineType",
    "classify_line",
    "split_lines",
    "split_runs",
    "Measure",
    "wrap_runs",
    "paginate",
]
