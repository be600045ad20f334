"""
Module: builder.config

Purpose:
    Configuration dataclass for PDF export. Immutable configuration with
    validation on construction, loadable from a JSON settings file.

Key Classes:
    - ExportConfig: Output location, filename policy and layout settings

Key Functions:
    - load_export_config(): Read ExportConfig from a JSON file

Dependencies:
    - dataclasses (std)
    - json (std)
    - builder.layout.config: LayoutConfig

Used By:
    - builder.controller: generate_pdf(), export_questions()
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

from exam_toolkit.builder.layout.config import LayoutConfig

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("exports")
DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class ExportConfig:
    """
    Configuration for exporting documents (immutable).

    Attributes:
        output_dir: Directory the finished PDFs are written to
        layout: Page layout configuration
        filename_from_title: Derive filenames from document titles
            instead of document types
        timestamp_format: strftime format for the header "Generated on" text

    Example:
        >>> config = ExportConfig(output_dir=Path("out"))
        >>> config.layout.page_format
        'a4'
    """

    output_dir: Path = DEFAULT_OUTPUT_DIR
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    filename_from_title: bool = False
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.output_dir, Path):
            object.__setattr__(self, "output_dir", Path(self.output_dir))
        if not isinstance(self.layout, LayoutConfig):
            raise ValueError(f"layout must be a LayoutConfig: {type(self.layout).__name__}")
        if not self.timestamp_format:
            raise ValueError("timestamp_format must not be empty")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExportConfig":
        """
        Build config from a settings mapping.

        Unknown keys are ignored with a debug log. A nested "layout"
        mapping is passed to LayoutConfig.

        Raises:
            ValueError: If a value fails validation
            TypeError: If data is not a mapping
        """
        if not isinstance(data, dict):
            raise TypeError(f"Export settings must be an object, got {type(data).__name__}")

        layout_data = data.get("layout") or {}
        if not isinstance(layout_data, dict):
            raise TypeError("'layout' must be an object")
        layout_names = {f.name for f in fields(LayoutConfig)}
        unknown = sorted(set(layout_data) - layout_names)
        if unknown:
            logger.debug(f"Ignoring unknown layout settings: {unknown}")
        layout = LayoutConfig(**{k: v for k, v in layout_data.items() if k in layout_names})

        kwargs: Dict[str, Any] = {"layout": layout}
        if "output_dir" in data:
            kwargs["output_dir"] = Path(data["output_dir"])
        if "filename_from_title" in data:
            kwargs["filename_from_title"] = bool(data["filename_from_title"])
        if "timestamp_format" in data:
            kwargs["timestamp_format"] = str(data["timestamp_format"])

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug(f"Ignoring unknown export settings: {unknown}")

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "output_dir": str(self.output_dir),
            "layout": self.layout.to_dict(),
            "filename_from_title": self.filename_from_title,
            "timestamp_format": self.timestamp_format,
        }


def load_export_config(path: Optional[Path]) -> ExportConfig:
    """
    Load export settings from a JSON file.

    A missing file gives the defaults. A file that cannot be read or parsed,
    or that holds invalid values, is logged and also gives the defaults.

    Args:
        path: Settings file location (None for defaults)

    Returns:
        ExportConfig
    """
    if path is None:
        return ExportConfig()

    path = Path(path)
    if not path.exists():
        logger.debug(f"No export settings at {path}, using defaults")
        return ExportConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        config = ExportConfig.from_dict(data)
    except json.JSONDecodeError as e:
        logger.warning(f"Export settings file is corrupted ({path}): {e}; using defaults")
        return ExportConfig()
    except (OSError, ValueError, TypeError) as e:
        logger.warning(f"Failed to load export settings from {path}: {e}; using defaults")
        return ExportConfig()

    logger.info(f"Loaded export settings from {path}")
    return config
