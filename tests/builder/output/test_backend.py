"""
Tests for the reportlab drawing backend.

PDFs are produced in memory and inspected with pypdf.
"""

import io

import pytest
from pypdf import PdfReader
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics

from exam_toolkit.builder.layout import LayoutConfig
from exam_toolkit.builder.output.backend import BackendUnavailableError, ReportLabBackend


def _read(pdf_bytes):
    return PdfReader(io.BytesIO(pdf_bytes))


class TestReportLabBackend:
    """Tests for ReportLabBackend."""

    def test_finish_when_nothing_drawn_then_single_a4_page(self):
        backend = ReportLabBackend(LayoutConfig())

        reader = _read(backend.finish())

        assert len(reader.pages) == 1
        box = reader.pages[0].mediabox
        assert float(box.width) == pytest.approx(210 * mm, abs=0.5)
        assert float(box.height) == pytest.approx(297 * mm, abs=0.5)

    def test_finish_when_letter_then_letter_page_size(self):
        backend = ReportLabBackend(LayoutConfig(page_format="letter"))

        box = _read(backend.finish()).pages[0].mediabox

        assert float(box.width) == pytest.approx(612, abs=0.5)
        assert float(box.height) == pytest.approx(792, abs=0.5)

    def test_new_page_when_called_then_page_added(self):
        backend = ReportLabBackend(LayoutConfig())
        backend.draw_string(20, 30, "First", "Helvetica", 11)
        backend.new_page()
        backend.draw_string(20, 30, "Second", "Helvetica-Bold", 11)

        reader = _read(backend.finish())

        assert len(reader.pages) == 2
        assert "First" in reader.pages[0].extract_text()
        assert "Second" in reader.pages[1].extract_text()

    def test_finish_when_called_twice_then_same_bytes(self):
        backend = ReportLabBackend(LayoutConfig())
        backend.draw_line(20, 30, 190, 30, 0.5)

        assert backend.finish() == backend.finish()

    def test_string_width_when_measured_then_millimetres(self):
        backend = ReportLabBackend(LayoutConfig())

        expected = pdfmetrics.stringWidth("Hello", "Helvetica", 11) / mm

        assert backend.string_width("Hello", "Helvetica", 11) == pytest.approx(expected)

    def test_string_width_when_bold_then_wider(self):
        backend = ReportLabBackend(LayoutConfig())

        assert backend.string_width("Answer", "Helvetica-Bold", 11) > backend.string_width("Answer", "Helvetica", 11)

    def test_page_size_when_a4_then_millimetres(self):
        width, height = ReportLabBackend(LayoutConfig()).page_size

        assert width == pytest.approx(210, abs=0.1)
        assert height == pytest.approx(297, abs=0.1)

    def test_init_when_ttf_missing_then_backend_unavailable(self, tmp_path):
        config = LayoutConfig(font_name="ExamSans", font_path=str(tmp_path / "missing.ttf"))

        with pytest.raises(BackendUnavailableError, match="ExamSans"):
            ReportLabBackend(config)

    def test_init_when_unknown_font_name_then_backend_unavailable(self):
        config = LayoutConfig(font_name="NoSuchFont-Regular")

        with pytest.raises(BackendUnavailableError):
            ReportLabBackend(config)

    def test_draw_when_unicode_text_then_no_error(self):
        backend = ReportLabBackend(LayoutConfig())

        backend.draw_string(20, 30, "∑ x² ≤ π 🎉", "Helvetica", 11)

        assert len(_read(backend.finish()).pages) == 1
