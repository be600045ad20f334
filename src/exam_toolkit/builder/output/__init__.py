"""
Module: builder.output

Purpose:
    PDF drawing for exported documents.
    Converts LayoutResult pages into PDF bytes through a PdfBackend.

Key Functions:
    - render_layout(): Draw a layout onto a backend

Key Classes:
    - PdfBackend: Drawing surface interface
    - ReportLabBackend: reportlab implementation
    - BackendUnavailableError: Backend cannot be set up

Dependencies:
    - reportlab: PDF generation

Used By:
    - builder.controller: Pipeline orchestration
"""

from .backend import BackendUnavailableError, PdfBackend, ReportLabBackend
from .renderer import render_layout

__all__ = [
    "BackendUnavailableError",
    "PdfBackend",
    "ReportLabBackend",
    "render_layout",
]
