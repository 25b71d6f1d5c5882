"""Theme presets.

Static lookup from theme id to the style tokens the dashboard renders with.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class ThemeId(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    NATURE = "nature"
    OCEAN = "ocean"
    SUNSET = "sunset"


@dataclass(frozen=True)
class ThemeConfig:
    name: str
    primary: str
    background: str
    is_dark: bool
    blobs: Tuple[str, str, str]

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["blobs"] = list(self.blobs)
        return data


THEMES: Dict[ThemeId, ThemeConfig] = {
    ThemeId.LIGHT: ThemeConfig("Classic", "indigo", "slate-50", False, ("purple-300", "indigo-300", "pink-300")),
    ThemeId.DARK: ThemeConfig("Midnight", "violet", "slate-900", True, ("violet-900", "indigo-900", "blue-900")),
    ThemeId.NATURE: ThemeConfig("Nature", "emerald", "stone-50", False, ("emerald-200", "teal-200", "green-200")),
    ThemeId.OCEAN: ThemeConfig("Ocean", "cyan", "slate-900", True, ("cyan-900", "blue-900", "teal-900")),
    ThemeId.SUNSET: ThemeConfig("Sunset", "rose", "orange-50", False, ("orange-200", "rose-200", "red-200")),
}

DEFAULT_THEME = ThemeId.LIGHT


def parse_theme(value: Any) -> ThemeId | None:
    """Return the ThemeId for a stored value, or None if it is not a known preset."""
    try:
        return ThemeId(value)
    except (ValueError, TypeError):
        return None


__all__ = ["DEFAULT_THEME", "THEMES", "ThemeConfig", "ThemeId", "parse_theme"]
