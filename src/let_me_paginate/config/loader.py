"""
Configuration Loader - Paginator Settings from YAML.

Reads a YAML document into a validated PaginatorConfig. The settings may
sit at the top of the document or under a ``paginator:`` key, so they can
share a file with the rest of an application's configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from let_me_paginate.config.models import PaginatorConfig

logger = logging.getLogger(__name__)

SECTION_KEY = "paginator"


def merge_settings(
    base: Mapping[str, Any],
    overlay: Mapping[str, Any],
) -> Dict[str, Any]:
    """Recursively merge overlay onto base; overlay wins on conflicts."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_settings(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Builds PaginatorConfig objects from YAML files or dictionaries."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Args:
            base_path: Directory that relative config paths are resolved against
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> PaginatorConfig:
        """
        Load and validate the paginator settings in a YAML file.

        Args:
            config_path: YAML file, absolute or relative to base_path
            overrides: Values deep-merged over the file contents

        Returns:
            Validated PaginatorConfig

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the document is not a mapping
            pydantic.ValidationError: If a setting is out of range
        """
        path = self._resolve_path(config_path)
        settings = self._read_section(path)

        if overrides:
            settings = merge_settings(settings, overrides)

        config = PaginatorConfig.model_validate(settings)
        logger.debug(
            f"Loaded paginator config from {path} "
            f"(page_size={config.pagination.default_page_size}, "
            f"cache={'on' if config.cache.enabled else 'off'})"
        )
        return config

    def load_from_dict(self, config_dict: Mapping[str, Any]) -> PaginatorConfig:
        """Validate settings given as a dictionary."""
        return PaginatorConfig.model_validate(self._unwrap(config_dict))

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        candidate = Path(path)
        return candidate if candidate.is_absolute() else self._base_path / candidate

    def _read_section(self, path: Path) -> Dict[str, Any]:
        with path.open(encoding="utf-8") as f:
            document = yaml.safe_load(f)

        if document is None:
            return {}
        if not isinstance(document, Mapping):
            raise ValueError(
                f"Config file {path} must contain a mapping, "
                f"got {type(document).__name__}"
            )
        return self._unwrap(document)

    def _unwrap(self, document: Mapping[str, Any]) -> Dict[str, Any]:
        """Return the paginator section when the settings are nested."""
        section = document.get(SECTION_KEY)
        if isinstance(section, Mapping):
            return dict(section)
        return dict(document)


def load_config(
    config_path: Union[str, Path],
    overrides: Optional[Mapping[str, Any]] = None,
    base_path: Optional[Path] = None,
) -> PaginatorConfig:
    """Load a PaginatorConfig from a YAML file in one call."""
    return ConfigLoader(base_path=base_path).load(config_path, overrides)
