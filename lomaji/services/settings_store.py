from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class DisplaySettings:
    """Presentation of the input buffer (colours are Qt/CSS colour names)."""

    font_point_size: int = 28
    complete_color: str = "#1b5e20"
    incomplete_color: str = "#b71c1c"
    hanji_color: str = "#000000"
    symbol_color: str = "#424242"
    selection_color: str = "#bbdefb"


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for display settings + log level

    settings.yaml structure:
      log_level: WARNING
      display:
        font_point_size: 28
        complete_color: "#1b5e20"
        ...
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            # <project_root>/settings.yaml, next to main.py
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to load settings from %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> None:
        try:
            p = self._path
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except (OSError, yaml.YAMLError) as e:
            # Best-effort persistence; callers should not crash on save failures.
            logger.warning("Failed to save settings to %s: %s", self._path, e)

    def get_display_settings(self) -> DisplaySettings:
        s = self.load()
        d = s.get("display") or {}
        if not isinstance(d, dict):
            d = {}
        defaults = DisplaySettings()

        def _color(key: str) -> str:
            v = d.get(key)
            if isinstance(v, str) and v.strip():
                return v.strip()
            return getattr(defaults, key)

        size = d.get("font_point_size", defaults.font_point_size)
        if not isinstance(size, (int, float)) or isinstance(size, bool) or size < 1:
            size = defaults.font_point_size

        return DisplaySettings(
            font_point_size=int(size),
            complete_color=_color("complete_color"),
            incomplete_color=_color("incomplete_color"),
            hanji_color=_color("hanji_color"),
            symbol_color=_color("symbol_color"),
            selection_color=_color("selection_color"),
        )

    def set_font_point_size(self, value: int) -> None:
        s = self.load()
        d = s.get("display") or {}
        if not isinstance(d, dict):
            d = {}
        d["font_point_size"] = max(1, int(value))
        s["display"] = d
        self.save(s)

    def get_log_level(self) -> str:
        v = self.load().get("log_level", "WARNING")
        if isinstance(v, str) and v.upper() in _LOG_LEVELS:
            return v.upper()
        return "WARNING"
