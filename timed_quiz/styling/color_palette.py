"""Color palette for the quiz window supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        light="#1F2937",      # Slate
        dark="#F3F4F6"
    )

    PAGE_BACKGROUND = ThemeColors(
        light="#F3F4F6",      # Light Gray
        dark="#111827"
    )

    CARD_BACKGROUND = ThemeColors(
        light="#FFFFFF",
        dark="#1F2937"
    )

    BORDER_PRIMARY = ThemeColors(
        light="#D1D5DB",
        dark="#374151"
    )

    # Start, next and submit buttons
    BUTTON_PRIMARY_BG = ThemeColors(
        light="#16A34A",      # Green
        dark="#22C55E"
    )

    BUTTON_PRIMARY_HOVER_BG = ThemeColors(
        light="#4ADE80",
        dark="#4ADE80"
    )

    BUTTON_SECONDARY_BG = ThemeColors(
        light="#4B5563",      # Gray
        dark="#6B7280"
    )

    BUTTON_DISABLED_BG = ThemeColors(
        light="#9CA3AF",
        dark="#4B5563"
    )

    BUTTON_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#FFFFFF"
    )

    TIMER_WARNING = ThemeColors(
        light="#EF4444",      # Red
        dark="#F87171"
    )
