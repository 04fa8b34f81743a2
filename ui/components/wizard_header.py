# -*- coding: utf-8 -*-
"""
Wizard Header Component - Title and step progress for wizards.
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QProgressBar
from PyQt5.QtGui import QFont

from app.config import Config


class WizardHeader(QWidget):
    """
    Wizard header with a title, a "Step n of m" label and a progress bar.

    Usage:
        header = WizardHeader(title="New Service Request")
        header.set_progress(current=2, total=7, percentage=16.7)
    """

    def __init__(self, title: str, subtitle: str = "", parent=None):
        """
        Args:
            title: Main title text
            subtitle: Optional line under the title (current step name)
            parent: Parent widget
        """
        super().__init__(parent)
        self._setup_ui(title, subtitle)

    def _setup_ui(self, title: str, subtitle: str):
        self.setStyleSheet(f"""
            QWidget {{
                background-color: {Config.HEADER_BG};
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(8)

        self.title_label = QLabel(title)
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        self.subtitle_label = QLabel(subtitle)
        self.subtitle_label.setStyleSheet(f"color: {Config.SECONDARY_COLOR};")
        layout.addWidget(self.subtitle_label)

        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(8)

        self.progress_label = QLabel("")
        progress_layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{
                border: none;
                background-color: #e9ecef;
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Config.PRIMARY_COLOR};
                border-radius: 3px;
            }}
        """)
        progress_layout.addWidget(self.progress_bar, 1)

        layout.addLayout(progress_layout)

    def set_title(self, title: str):
        self.title_label.setText(title)

    def set_subtitle(self, subtitle: str):
        self.subtitle_label.setText(subtitle)

    def set_progress(self, current: int, total: int, percentage: float):
        """Show "Step current of total" and fill the bar to percentage."""
        self.progress_label.setText(f"Step {current} of {total}")
        self.progress_bar.setValue(int(percentage))
