"""
Unit tests for ExportConfig and JSON settings loading.
"""

import json
import logging
from pathlib import Path

import pytest

from exam_toolkit.builder.config import ExportConfig, load_export_config
from exam_toolkit.builder.layout import LayoutConfig, SeparatorStyle


class TestExportConfig:
    """Tests for ExportConfig."""

    def test_defaults_when_created_then_exports_dir_and_default_layout(self):
        config = ExportConfig()

        assert config.output_dir == Path("exports")
        assert config.layout == LayoutConfig()
        assert not config.filename_from_title

    def test_init_when_output_dir_string_then_path(self):
        assert ExportConfig(output_dir="out").output_dir == Path("out")

    def test_init_when_layout_not_config_then_raises(self):
        with pytest.raises(ValueError, match="layout"):
            ExportConfig(layout={"page_format": "a4"})

    def test_from_dict_when_nested_layout_then_built(self):
        config = ExportConfig.from_dict({
            "output_dir": "pdfs",
            "filename_from_title": True,
            "layout": {"page_format": "letter", "separator_style": "rule", "margin_top": 15},
        })

        assert config.output_dir == Path("pdfs")
        assert config.filename_from_title
        assert config.layout.page_format == "letter"
        assert config.layout.separator_style is SeparatorStyle.RULE
        assert config.layout.margin_top == 15

    def test_from_dict_when_unknown_keys_then_ignored(self):
        config = ExportConfig.from_dict({"theme": "dark", "layout": {"colour": "red"}})

        assert config == ExportConfig()

    def test_from_dict_when_invalid_value_then_raises(self):
        with pytest.raises(ValueError):
            ExportConfig.from_dict({"layout": {"page_format": "a0"}})

    def test_to_dict_when_round_tripped_then_equal(self):
        config = ExportConfig(output_dir=Path("out"), layout=LayoutConfig(page_format="letter"))

        assert ExportConfig.from_dict(config.to_dict()) == config


class TestLoadExportConfig:
    """Tests for load_export_config."""

    def test_load_when_missing_file_then_defaults(self, tmp_path):
        assert load_export_config(tmp_path / "nope.json") == ExportConfig()

    def test_load_when_none_then_defaults(self):
        assert load_export_config(None) == ExportConfig()

    def test_load_when_valid_file_then_values_applied(self, tmp_path):
        path = tmp_path / "export.json"
        path.write_text(json.dumps({"layout": {"include_header": False}}), encoding="utf-8")

        config = load_export_config(path)

        assert config.layout.include_header is False

    def test_load_when_corrupted_file_then_warns_and_defaults(self, tmp_path, caplog):
        path = tmp_path / "export.json"
        path.write_text("{ not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = load_export_config(path)

        assert config == ExportConfig()
        assert "corrupted" in caplog.text

    def test_load_when_invalid_values_then_warns_and_defaults(self, tmp_path, caplog):
        path = tmp_path / "export.json"
        path.write_text(json.dumps({"layout": {"margin_left": -5}}), encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = load_export_config(path)

        assert config == ExportConfig()
        assert "Failed to load export settings" in caplog.text

    def test_load_when_not_an_object_then_warns_and_defaults(self, tmp_path, caplog):
        path = tmp_path / "export.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = load_export_config(path)

        assert config == ExportConfig()
