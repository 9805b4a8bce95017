#!/usr/bin/env python3
"""Configuration management for histogram rendering.

This module provides a unified configuration system that supports:
1. CLI flags (-r / -s via histogrammer.cli.main)
2. JSON configuration files (--config)
3. Validation and defaults

Precedence, lowest first: defaults, JSON file, CLI flags.
"""

import json
import os
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class RenderConfig:
    """Chart geometry."""

    rows: int = 10  # Number of chart rows drawn above the axis
    tick_stride: int = 3  # A tick label is drawn every tick_stride rows


@dataclass
class GlyphConfig:
    """Characters used to draw the chart."""

    filled: str = "*"
    blank: str = " "
    vertical_axis: str = "|"
    horizontal_axis: str = "-"
    corner: str = "+"


@dataclass
class OutputConfig:
    """Output settings."""

    debug: bool = False  # Enable debug output


@dataclass
class HistogramConfig:
    """Complete histogram configuration."""

    render: RenderConfig = field(default_factory=RenderConfig)
    glyphs: GlyphConfig = field(default_factory=GlyphConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    version: str = "1.0"

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def to_json(self, filepath: str, indent: int = 2) -> None:
        """Save configuration to JSON file.

        Args:
            filepath: Path to JSON file
            indent: JSON indentation level
        """
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistogramConfig":
        """Create config from dictionary.

        Keys starting with ``_`` are treated as documentation and dropped.

        Raises:
            ValueError: If a section contains an unknown key
        """

        def filter_meta(d: dict) -> dict:
            return {k: v for k, v in d.items() if not k.startswith("_")}

        try:
            return cls(
                render=RenderConfig(**filter_meta(data.get("render", {}))),
                glyphs=GlyphConfig(**filter_meta(data.get("glyphs", {}))),
                output=OutputConfig(**filter_meta(data.get("output", {}))),
                version=data.get("version", "1.0"),
            )
        except (TypeError, AttributeError) as exc:
            raise ValueError(f"Invalid configuration: {exc}") from exc

    @classmethod
    def from_json(cls, filepath: str) -> "HistogramConfig":
        """Load configuration from JSON file.

        Raises:
            ValueError: If the file is not valid JSON or not a JSON object
        """
        with open(filepath, "r") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Config file {filepath} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Config file {filepath} must contain a JSON object")
        return cls.from_dict(data)

    def validate(self) -> tuple[bool, list[str]]:
        """Validate configuration.

        Returns:
            Tuple of (is_valid, error_messages)
        """
        errors = []

        for name in ("rows", "tick_stride"):
            value = getattr(self.render, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                errors.append(
                    f"render.{name} must be a positive integer. Got {value!r}."
                )

        for name, value in asdict(self.glyphs).items():
            if not isinstance(value, str) or len(value) != 1:
                errors.append(
                    f"glyphs.{name} must be a single character. Got {value!r}."
                )

        if not isinstance(self.output.debug, bool):
            errors.append(
                f"output.debug must be true or false. Got {self.output.debug!r}."
            )

        return len(errors) == 0, errors


def load_config(
    config_file: Optional[str] = None,
    config_dict: Optional[Dict[str, Any]] = None,
) -> HistogramConfig:
    """Load configuration from file or dictionary.

    Args:
        config_file: Path to JSON config file
        config_dict: Configuration dictionary (alternative to file)

    Returns:
        HistogramConfig instance

    Raises:
        ValueError: If neither file nor dict provided, or if file doesn't exist
    """
    if config_file:
        if not os.path.isfile(config_file):
            raise ValueError(f"Config file not found: {config_file}")
        return HistogramConfig.from_json(config_file)
    elif config_dict is not None:
        return HistogramConfig.from_dict(config_dict)
    else:
        raise ValueError("Must provide either config_file or config_dict")


def create_example_config(output_path: str = "histogram_config_example.json") -> None:
    """Write an example configuration file with all sections populated."""
    config = HistogramConfig(
        render=RenderConfig(rows=12, tick_stride=4),
        glyphs=GlyphConfig(filled="#"),
        output=OutputConfig(debug=False),
    )

    config.to_json(output_path)
    print(f"Example configuration written to: {output_path}")


# =============================================================================
# Default Configuration Instances
# Single source of truth for default values; other modules import these.
# =============================================================================

DEFAULT_RENDER_CONFIG = RenderConfig()
DEFAULT_GLYPH_CONFIG = GlyphConfig()
DEFAULT_OUTPUT_CONFIG = OutputConfig()


if __name__ == "__main__":
    create_example_config()
