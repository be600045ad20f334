"""
Module: builder.layout.paginator

Purpose:
    Lay out Document content onto pages.
    Turns the markdown-like content string into positioned, styled
    sub-lines with explicit and automatic page breaks.

Key Functions:
    - paginate(): Main pagination function

Algorithm:
    1. Cursor starts at the top margin (below the title header on page 1)
    2. Content is split on newlines and each line classified
    3. "---" starts a new page (or places a rule, per SeparatorStyle)
    4. "# " lines become bold headings; other lines become body text
       with **bold** runs; option lines are indented
    5. Every logical line is word-wrapped to the printable width
    6. Before each sub-line: if it would cross the bottom margin and the
       page already holds content, start a new page

Dependencies:
    - builder.layout.config: LayoutConfig
    - builder.layout.markup: Line classification, bold runs
    - builder.layout.wrapping: Word wrap
    - builder.layout.models: Placements and pages

Used By:
    - builder.controller: generate_pdf()
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .config import LayoutConfig, SeparatorStyle, pt_to_mm
from .markup import ContentLineType, classify_line, heading_text, split_lines, split_runs
from .models import (
    LayoutResult,
    LineKind,
    LinePlacement,
    PagePlan,
    RulePlacement,
    TextRun,
    TextSpan,
)
from .wrapping import Measure, wrap_runs

logger = logging.getLogger(__name__)

TITLE_LINE_FACTOR = 1.2
HEADER_GAP = 4.0  # mm between title and timestamp
HEADER_RULE_WIDTH = 0.5  # pt
HEADER_RULE_GAP = 2.0  # mm between the last title line and the rule


class _LayoutState:
    """Cursor and page accumulation for one paginate() call."""

    def __init__(self, config: LayoutConfig) -> None:
        self.config = config
        self.pages: List[PagePlan] = []
        self.lines: List[LinePlacement] = []
        self.rules: List[RulePlacement] = []
        self.page_index = 0
        self.page_start = config.margin_top
        self.y = config.margin_top
        self.explicit_breaks = 0
        self.automatic_breaks = 0
        self.warnings: List[str] = []

    @property
    def has_content(self) -> bool:
        return bool(self.lines or self.rules)

    def new_page(self, *, explicit: bool) -> None:
        self.pages.append(PagePlan(
            index=self.page_index,
            lines=tuple(self.lines),
            rules=tuple(self.rules),
            height_used=self.y - self.config.margin_top,
        ))
        self.page_index += 1
        self.lines = []
        self.rules = []
        self.page_start = self.config.margin_top
        self.y = self.config.margin_top
        if explicit:
            self.explicit_breaks += 1
        else:
            self.automatic_breaks += 1

    def ensure_room(self, height: float) -> None:
        """Start a new page if height does not fit below the cursor."""
        bottom = self.config.content_bottom
        if self.y + height <= bottom:
            return
        if self.has_content:
            self.new_page(explicit=False)
            return
        # Nothing drawn yet: only leading space pushed the cursor down
        self.y = self.page_start
        if self.y + height > bottom:
            message = (
                f"Line overflows page {self.page_index + 1}: "
                f"{height:.1f}mm needed, {bottom - self.y:.1f}mm available"
            )
            logger.warning(message)
            self.warnings.append(message)

    def place(self, line: LinePlacement) -> None:
        self.lines.append(line)
        self.y += line.height

    def finish(self) -> LayoutResult:
        if self.pages and not self.has_content:
            # Only an explicit "---" can leave the last page empty
            logger.debug(f"Dropping empty trailing page {self.page_index + 1}")
            self.explicit_breaks -= 1
            return self._result()
        self.pages.append(PagePlan(
            index=self.page_index,
            lines=tuple(self.lines),
            rules=tuple(self.rules),
            height_used=self.y - self.config.margin_top,
        ))
        return self._result()

    def _result(self) -> LayoutResult:
        return LayoutResult(
            pages=tuple(self.pages),
            warnings=self.warnings,
            explicit_breaks=self.explicit_breaks,
            automatic_breaks=self.automatic_breaks,
        )


def paginate(
    content: str,
    measure: Measure,
    config: LayoutConfig,
    *,
    title: Optional[str] = None,
    timestamp_text: Optional[str] = None,
) -> LayoutResult:
    """
    Arrange document content onto pages.

    Args:
        content: Markdown-like Document content
        measure: Text width function (text, font_name, size_pt) -> mm
        config: Layout configuration
        title: Header title (drawn when config.include_header is set)
        timestamp_text: Right-aligned header text (drawn when
            config.include_timestamp is set)

    Returns:
        LayoutResult with at least one page

    Example:
        >>> result = paginate("# Questions\\n\\n**Question 1:** Why?", measure, LayoutConfig())
        >>> result.page_count
        1
    """
    state = _LayoutState(config)

    if config.include_header and title is not None:
        _place_header(
            state,
            title,
            timestamp_text if config.include_timestamp else None,
            measure,
            config,
        )

    for line in split_lines(content):
        line_type = classify_line(line)

        if line_type is ContentLineType.BLANK:
            # Leading blank lines never push content down a fresh page
            if state.has_content:
                state.y += config.blank_line_height
            continue

        if line_type is ContentLineType.SEPARATOR:
            _place_separator(state, config)
            continue

        if line_type is ContentLineType.HEADING:
            runs = split_runs(heading_text(line), bold=True)
            font_size = config.heading_font_size
            line_height = config.heading_line_height
            spacing_after = config.heading_spacing
            indent = 0.0
            kind = LineKind.HEADING
        else:
            runs = split_runs(line)
            font_size = config.body_font_size
            line_height = config.body_line_height
            spacing_after = config.paragraph_spacing
            indent = config.option_indent if line_type is ContentLineType.OPTION else 0.0
            kind = LineKind.BODY

        sub_lines = wrap_runs(
            runs,
            config.available_width - indent,
            measure,
            font_name=config.font_name,
            bold_font_name=config.bold_font_name,
            font_size=font_size,
        )

        for sub_line in sub_lines:
            state.ensure_room(line_height)
            spans = _position_runs(
                sub_line, config.margin_left + indent, measure, config, font_size
            )
            state.place(LinePlacement(spans=spans, top=state.y, height=line_height, kind=kind))

        if sub_lines:
            state.y += spacing_after

    result = state.finish()

    logger.info(
        f"Paginated {result.total_lines} lines onto {result.page_count} pages "
        f"({result.explicit_breaks} explicit, {result.automatic_breaks} automatic breaks)"
    )

    return result


def _place_separator(state: _LayoutState, config: LayoutConfig) -> None:
    """Handle a "---" line."""
    if config.separator_style is SeparatorStyle.RULE:
        state.ensure_room(2 * config.rule_spacing)
        state.y += config.rule_spacing
        state.rules.append(RulePlacement(
            x1=config.margin_left,
            x2=config.content_right,
            y=state.y,
            line_width=config.rule_width,
        ))
        state.y += config.rule_spacing
        return

    if state.has_content:
        state.new_page(explicit=True)
    else:
        logger.debug(f"Skipping page break on empty page {state.page_index + 1}")


def _place_header(
    state: _LayoutState,
    title: str,
    timestamp_text: Optional[str],
    measure: Measure,
    config: LayoutConfig,
) -> None:
    """
    Place the title header on the first page.

    The title is bold and wraps if needed; the timestamp is right-aligned
    on the first title line. A rule separates the header from content.
    """
    title_size = config.title_font_size
    line_height = pt_to_mm(title_size) * TITLE_LINE_FACTOR

    timestamp_span = None
    reserved = 0.0
    if timestamp_text:
        ts_width = measure(timestamp_text, config.font_name, config.timestamp_font_size)
        timestamp_span = TextSpan(
            text=timestamp_text,
            x=config.content_right - ts_width,
            width=ts_width,
            font_name=config.font_name,
            font_size=config.timestamp_font_size,
        )
        reserved = ts_width + HEADER_GAP

    title_lines = wrap_runs(
        [TextRun(title, True)],
        max(config.available_width - reserved, config.available_width / 2),
        measure,
        font_name=config.font_name,
        bold_font_name=config.bold_font_name,
        font_size=title_size,
    ) or [[]]

    for i, runs in enumerate(title_lines):
        spans = _position_runs(runs, config.margin_left, measure, config, title_size)
        if i == 0 and timestamp_span is not None:
            spans = spans + (timestamp_span,)
        if not spans:
            continue
        state.ensure_room(line_height)
        state.place(LinePlacement(spans=spans, top=state.y, height=line_height, kind=LineKind.TITLE))

    state.ensure_room(HEADER_RULE_GAP)
    rule_y = max(config.margin_top + config.header_rule_offset, state.y + HEADER_RULE_GAP)
    state.rules.append(RulePlacement(
        x1=config.margin_left,
        x2=config.content_right,
        y=rule_y,
        line_width=HEADER_RULE_WIDTH,
    ))

    state.y = max(
        config.margin_top + config.header_height,
        rule_y + config.header_height - config.header_rule_offset,
    )
    state.page_start = state.y


def _position_runs(
    runs: List[TextRun],
    x: float,
    measure: Measure,
    config: LayoutConfig,
    font_size: float,
) -> tuple[TextSpan, ...]:
    """Convert runs to spans laid out left to right from x."""
    spans = []
    for run in runs:
        font_name = config.bold_font_name if run.bold else config.font_name
        width = measure(run.text, font_name, font_size)
        spans.append(TextSpan(
            text=run.text,
            x=x,
            width=width,
            font_name=font_name,
            font_size=font_size,
        ))
        x += width
    return tuple(spans)
