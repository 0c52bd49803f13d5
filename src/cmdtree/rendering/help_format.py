"""
Help text layout configuration for cmdtree.

This module provides configuration for the column widths and indents used
when rendering command listings and command help.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any


@dataclass
class HelpFormat:
    """Layout settings for rendered help text.

    Can be created from dict, YAML, or Path with partial overrides.
    Only specified values override defaults.

    Examples:
        # All defaults
        help_format = HelpFormat()

        # Partial override from dict
        help_format = HelpFormat.from_dict({"width": 100})

        # From YAML file
        help_format = HelpFormat.from_yaml("help.yaml")
    """

    # Wrapped lines stay strictly shorter than this many columns
    width: int = 80
    # Indent of wrapped description text
    description_indent: int = 3
    # Indent of each entry in a tree's command listing
    listing_indent: int = 4
    # Spaces between the name column and the brief column
    column_gap: int = 2

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> HelpFormat:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Only keys matching
                   dataclass fields will be used.

        Returns:
            HelpFormat instance with specified overrides
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> HelpFormat:
        """Create from YAML file with partial overrides.

        Args:
            yaml_path: Path to YAML file containing configuration

        Returns:
            HelpFormat instance with YAML overrides

        Example YAML:
            width: 100
            listing_indent: 2
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)
