"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QStackedWidget {{
                background-color: {ColorPalette.PAGE_BACKGROUND.get(theme)};
            }}
            QWidget {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QFrame#card {{
                background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_TEXT.get(theme)};
                border: none;
                border-radius: 6px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_PRIMARY_HOVER_BG.get(theme)};
            }}
            QPushButton#secondary {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BUTTON_DISABLED_BG.get(theme)};
            }}
            QRadioButton {{
                padding: 8px;
            }}
        """

    @staticmethod
    def get_title_style(point_size: int = 24) -> str:
        return f"font-size: {point_size}pt; font-weight: bold;"

    @staticmethod
    def get_timer_style(warning: bool, theme: Theme = Theme.LIGHT) -> str:
        if warning:
            return f"font-size: 16pt; font-weight: bold; color: {ColorPalette.TIMER_WARNING.get(theme)};"
        return "font-size: 16pt; font-weight: bold;"
