"""Centralized stylesheets for the application."""

from .color_palette import ColorPalette


class Styles:
    """Helper class to generate Qt stylesheets."""

    @staticmethod
    def get_main_window_style() -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PAGE};
                color: {ColorPalette.TEXT_PRIMARY};
            }}
            QWidget {{
                color: {ColorPalette.TEXT_PRIMARY};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QLineEdit {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY};
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 8px;
                padding: 6px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                border: 1px solid {ColorPalette.BORDER_LIGHT};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_MUTED};
            }}
        """

    @staticmethod
    def get_card_style() -> str:
        return (
            f"background-color: {ColorPalette.BACKGROUND_PRIMARY};"
            f" border-radius: 8px; padding: 16px;"
        )

    @staticmethod
    def get_primary_button_style() -> str:
        return (
            f"background-color: {ColorPalette.ACCENT_PRIMARY};"
            f" color: {ColorPalette.BUTTON_PRIMARY_TEXT}; border-radius: 4px; padding: 8px 16px;"
        )

    @staticmethod
    def get_secondary_button_style() -> str:
        return (
            f"background-color: {ColorPalette.BUTTON_SECONDARY_BG};"
            f" border-radius: 4px; padding: 8px 16px;"
        )

    @staticmethod
    def get_danger_button_style() -> str:
        return (
            f"background-color: {ColorPalette.DANGER_BUTTON};"
            f" color: {ColorPalette.BUTTON_PRIMARY_TEXT}; border-radius: 4px; padding: 8px 16px;"
        )

    @staticmethod
    def get_option_button_style(selected: bool) -> str:
        if selected:
            return (
                f"text-align: left; padding: 12px; border-radius: 4px;"
                f" border: 1px solid {ColorPalette.ACCENT_PRIMARY};"
                f" background-color: {ColorPalette.ACCENT_SOFT};"
            )
        return (
            f"text-align: left; padding: 12px; border-radius: 4px;"
            f" border: 1px solid {ColorPalette.BORDER_LIGHT};"
            f" background-color: {ColorPalette.BACKGROUND_PRIMARY};"
        )

    @staticmethod
    def get_jump_button_style(answered: bool, current: bool) -> str:
        background = ColorPalette.SUCCESS_SOFT if answered else ColorPalette.NEUTRAL_SOFT
        border = ColorPalette.ACCENT_PRIMARY if current else background
        return f"padding: 8px; border-radius: 4px; background-color: {background}; border: 1px solid {border};"

    @staticmethod
    def get_error_label_style() -> str:
        return f"color: {ColorPalette.ERROR}; font-size: 12px;"

    @staticmethod
    def get_muted_label_style() -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY}; font-size: 13px;"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
