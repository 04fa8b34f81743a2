# -*- coding: utf-8 -*-
"""
Action Button Component - Reusable button with consistent styling.

Used by the wizard footer and the step forms so every button shares the
same dimensions and colors.
"""

from PyQt5.QtWidgets import QPushButton

from app.config import Config


_VARIANT_STYLES = {
    # Next, Finish, Assign
    "primary": f"""
        QPushButton {{
            background-color: {Config.PRIMARY_COLOR};
            color: white;
            border: none;
            padding: 8px 12px;
            border-radius: 4px;
            font-size: 13px;
        }}
        QPushButton:hover {{
            background-color: #0b5ed7;
        }}
        QPushButton:disabled {{
            background-color: #9ec5fe;
        }}
    """,
    # Cancel, Previous
    "secondary": f"""
        QPushButton {{
            background-color: {Config.SECONDARY_COLOR};
            color: white;
            border: none;
            padding: 8px 12px;
            border-radius: 4px;
            font-size: 13px;
        }}
        QPushButton:hover {{
            background-color: #5c636a;
        }}
        QPushButton:disabled {{
            background-color: #adb5bd;
        }}
    """,
    # Remove Selected
    "outline": f"""
        QPushButton {{
            background-color: white;
            color: {Config.PRIMARY_COLOR};
            border: 1px solid {Config.PRIMARY_COLOR};
            padding: 8px 12px;
            border-radius: 4px;
            font-size: 13px;
        }}
        QPushButton:hover {{
            background-color: #e7f1ff;
        }}
        QPushButton:disabled {{
            color: #adb5bd;
            border-color: {Config.BORDER_COLOR};
        }}
    """,
}


class ActionButton(QPushButton):
    """
    Reusable action button with consistent styling.

    Variants:
    - primary: Solid blue, for main actions (Next, Finish)
    - secondary: Gray, for Cancel and Previous
    - outline: Blue border on white, for list actions

    Usage:
        btn = ActionButton("Next", variant="primary")
        btn = ActionButton("Cancel", variant="secondary", width=120)
    """

    def __init__(
        self,
        text: str,
        variant: str = "primary",
        width: int = 114,
        height: int = 40,
        parent=None
    ):
        """
        Args:
            text: Button text
            variant: "primary", "secondary" or "outline"
            width: Button width in pixels; 0 lets the layout decide
            height: Button height in pixels
            parent: Parent widget
        """
        super().__init__(text, parent)

        if variant not in _VARIANT_STYLES:
            raise ValueError(f"Invalid variant: {variant}. Must be 'primary', 'secondary', or 'outline'")
        self.variant = variant

        if width:
            self.setFixedSize(width, height)
        else:
            self.setFixedHeight(height)

        self.setStyleSheet(_VARIANT_STYLES[variant])
