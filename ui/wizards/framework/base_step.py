# -*- coding: utf-8 -*-
"""
Base Step - Step contract and Qt base class for wizard steps.

WizardStep is the contract the engine navigates over:
- get_content(): The step's display surface
- validate(): Gate forward navigation (truthy = may advance)
- on_enter(): Refresh the step from the domain object
- reset(): Clear the step and what it wrote to the domain object
- get_title(): Display label
- set_active(): Visibility notification from the engine

BaseStep implements it on top of QWidget; concrete steps implement
setup_ui(), populate_data(), validate_step() and reset_step(). The UI is
built on first use, whichever contract method comes first.
"""

from typing import List, Any, Optional
from abc import ABC, ABCMeta, abstractmethod
from dataclasses import dataclass

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QFormLayout, QFrame, QLabel
from PyQt5.QtGui import QFont

from app.config import Config


@dataclass
class StepValidationResult:
    """Result of step validation. Truthy exactly when valid."""
    is_valid: bool
    errors: List[str]
    warnings: List[str] = None

    def __post_init__(self):
        if self.warnings is None:
            self.warnings = []

    def __bool__(self) -> bool:
        return self.is_valid

    def add_error(self, message: str):
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        return len(self.warnings) > 0


class WizardStep(ABC):
    """
    One page of a linear wizard.

    validate() may return a bool or a StepValidationResult. It must only
    write to the domain object when it succeeds.
    """

    _active = False

    @abstractmethod
    def get_content(self) -> Any:
        """Return the surface the host displays for this step."""

    @abstractmethod
    def validate(self):
        """Return a truthy value if the wizard may move past this step."""

    @abstractmethod
    def on_enter(self):
        """Called every time the step becomes the current step."""

    @abstractmethod
    def reset(self):
        """Clear step state and every domain field this step wrote."""

    @abstractmethod
    def get_title(self) -> str:
        pass

    def set_active(self, active: bool):
        """Called by the engine when the step becomes (in)active."""
        self._active = active

    def is_active(self) -> bool:
        return self._active


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, WizardStep, metaclass=ABCQWidgetMeta):
    """
    Qt base class for wizard steps.

    Provides:
    - Lazy UI setup on first use
    - Show/hide driven by set_active()
    - A step-local error label
    """

    def __init__(self, context: 'WizardContext', parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            context: The wizard context for data sharing
            parent: Parent widget
        """
        super().__init__(parent)
        self.context = context
        self._is_initialized = False

        # Main layout
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"color: {Config.ERROR_COLOR};")
        self.error_label.setVisible(False)

    def initialize(self):
        """
        Initialize the step (called once).

        Builds the UI the first time the step content is requested.
        """
        if not self._is_initialized:
            self.setup_ui()
            self.main_layout.addStretch()
            self.main_layout.addWidget(self.error_label)
            self._is_initialized = True

    # =========================================================================
    # WizardStep
    # =========================================================================

    def get_content(self) -> QWidget:
        self.initialize()
        return self

    def on_enter(self):
        """Refresh the UI from the context's domain object."""
        self.initialize()
        self.populate_data()

    def set_active(self, active: bool):
        super().set_active(active)
        self.setVisible(active)

    def validate(self):
        """Build the UI if needed, then run validate_step()."""
        self.initialize()
        return self.validate_step()

    def reset(self):
        """Build the UI if needed, clear it through reset_step(), drop errors."""
        self.initialize()
        self.reset_step()
        self.clear_errors()

    def get_title(self) -> str:
        """Default implementation returns the class name."""
        return self.__class__.__name__

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """
        Setup the step's UI.

        This method is called once during initialization.
        Create all widgets and layouts here.
        """
        pass

    @abstractmethod
    def populate_data(self):
        """Copy the domain object's current values into the inputs."""
        pass

    @abstractmethod
    def validate_step(self):
        """
        Check the inputs and commit them to the domain object.

        Returns a bool or StepValidationResult; commits nothing when invalid.
        """
        pass

    @abstractmethod
    def reset_step(self):
        """Clear the inputs and every domain field this step writes."""
        pass

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def get_description(self) -> str:
        """Optional text shown under the step title."""
        return ""

    def add_title_section(self):
        """Add the step title and description at the top of the step."""
        title_label = QLabel(self.get_title())
        title_font = QFont()
        title_font.setPointSize(12)
        title_font.setBold(True)
        title_label.setFont(title_font)
        self.main_layout.addWidget(title_label)

        description = self.get_description()
        if description:
            description_label = QLabel(description)
            description_label.setWordWrap(True)
            description_label.setStyleSheet(f"color: {Config.SECONDARY_COLOR};")
            self.main_layout.addWidget(description_label)

    def add_card(self, title: str = "") -> QFormLayout:
        """Add a bordered form section and return its layout."""
        card = QFrame()
        card.setObjectName("stepCard")
        card.setStyleSheet(f"""
            QFrame#stepCard {{
                background-color: white;
                border: 1px solid {Config.BORDER_COLOR};
                border-radius: 8px;
            }}
        """)
        form = QFormLayout(card)
        form.setContentsMargins(16, 12, 16, 12)
        form.setSpacing(10)
        if title:
            heading = QLabel(title)
            heading.setStyleSheet("font-weight: bold;")
            form.addRow(heading)
        self.main_layout.addWidget(card)
        return form

    def create_validation_result(self) -> StepValidationResult:
        """Create a new validation result object."""
        return StepValidationResult(is_valid=True, errors=[], warnings=[])

    def show_errors(self, errors: List[str]):
        """Show messages in the step's error label."""
        if not errors:
            self.clear_errors()
            return
        self.error_label.setText("\n".join(errors))
        self.error_label.setVisible(True)

    def clear_errors(self):
        self.error_label.clear()
        self.error_label.setVisible(False)

    def has_errors(self) -> bool:
        return not self.error_label.isHidden()
