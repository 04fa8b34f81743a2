# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all wizards.

Provides unified wizard UI with:
- Header with title and progress
- Step container holding every step surface
- Navigation buttons (Cancel, Previous, Next/Finish)
- Validation feedback
"""

from typing import List, Optional
from abc import abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QFrame
from PyQt5.QtCore import pyqtSignal

from app.config import Config
from .base_step import WizardStep, ABCQWidgetMeta
from .wizard_context import WizardContext
from .wizard_engine import WizardEngine
from ui.components.wizard_header import WizardHeader
from ui.components.wizard_footer import WizardFooter
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_context(): Create and return wizard context
    - create_steps(): Create and return list of wizard steps
    - on_submit(): Handle final submission
    """

    VALIDATION_HINT = "Please correct the errors before continuing."

    # Signals
    wizard_completed = pyqtSignal(dict)  # Emitted with context.to_dict() when submitted
    wizard_cancelled = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None):
        """Initialize the wizard."""
        super().__init__(parent)

        self.context = self.create_context()

        self.engine = WizardEngine(self.context, self)
        self.engine.step_added.connect(self._on_step_added)
        self.engine.step_changed.connect(self._on_step_changed)
        self.engine.validation_failed.connect(self._on_validation_failed)
        self.engine.wizard_reset.connect(self._on_wizard_reset)

        self._setup_ui()

        for step in self.create_steps():
            self.engine.add_step(step)

        if self.engine.get_total_steps():
            self.engine.get_current_step().on_enter()
        self._refresh()

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_context(self) -> WizardContext:
        """Create and return wizard context."""
        pass

    @abstractmethod
    def create_steps(self) -> List[WizardStep]:
        """
        Create and return list of wizard steps, in display order.
        """
        pass

    @abstractmethod
    def on_submit(self) -> bool:
        """
        Handle wizard submission.

        Called when the user clicks Finish and the last step validated.

        Returns:
            True if submission was successful, False otherwise
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        """Get wizard title. Override to customize."""
        return "Wizard"

    def get_submit_button_text(self) -> str:
        """Get submit button text. Override to customize."""
        return "Finish"

    def on_cancel(self) -> bool:
        """
        Handle wizard cancellation.

        Returns:
            True if cancellation should proceed, False to prevent
        """
        return True

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        self.setWindowTitle(self.get_wizard_title())
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.header = WizardHeader(self.get_wizard_title())
        main_layout.addWidget(self.header)
        main_layout.addWidget(self._separator())

        # Every step surface lives here; steps show/hide themselves
        self.step_container = QWidget()
        self.step_layout = QVBoxLayout(self.step_container)
        self.step_layout.setContentsMargins(0, 0, 0, 0)
        self.step_layout.setSpacing(0)
        main_layout.addWidget(self.step_container, 1)

        main_layout.addWidget(self._separator())
        self.footer = WizardFooter()
        self.footer.cancel_clicked.connect(self._handle_cancel)
        self.footer.previous_clicked.connect(self._handle_previous)
        self.footer.next_clicked.connect(self._handle_next)
        main_layout.addWidget(self.footer)

    @staticmethod
    def _separator() -> QFrame:
        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet(f"background-color: {Config.BORDER_COLOR};")
        separator.setFixedHeight(1)
        return separator

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def _handle_previous(self):
        self.engine.previous_step()

    def _handle_next(self):
        if self.engine.is_last_step():
            self._handle_submit()
        else:
            self.engine.next_step()

    def _handle_cancel(self):
        if self.on_cancel():
            self.context.status = "cancelled"
            logger.info(f"Wizard cancelled: {self.context.reference_number}")
            self.wizard_cancelled.emit()
            self.close()

    def _handle_submit(self):
        """Validate the last step, then hand over to on_submit()."""
        result = self.engine.get_current_step().validate()
        if not result:
            self._on_validation_failed(result)
            return

        self.context.mark_step_completed(self.engine.get_current_step_index())
        if self.on_submit():
            self.context.status = "completed"
            logger.info(f"Wizard completed: {self.context.reference_number}")
            self.wizard_completed.emit(self.context.to_dict())
            self.close()

    def reset_wizard(self):
        """Clear every step and return to the first one."""
        self.engine.reset()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_step_added(self, step: WizardStep):
        self.step_layout.addWidget(step.get_content())

    def _on_step_changed(self, old_index: int, new_index: int):
        self.footer.set_info_text("")
        self._refresh()

    def _on_wizard_reset(self):
        self.context.status = "draft"

    def _on_validation_failed(self, result):
        self.footer.set_info_text(self.VALIDATION_HINT)

    def _refresh(self):
        """Update progress indicator and navigation buttons."""
        total = self.engine.get_total_steps()
        if not total:
            self.footer.set_next_enabled(False)
            self.footer.set_previous_enabled(False)
            return

        current_step = self.engine.get_current_step()
        self.header.set_subtitle(current_step.get_title())
        self.header.set_progress(
            self.engine.get_current_step_index() + 1,
            total,
            self.engine.get_progress_percentage()
        )

        self.footer.set_previous_enabled(self.engine.can_go_previous())
        if self.engine.is_last_step():
            self.footer.set_next_text(self.get_submit_button_text())
        else:
            self.footer.set_next_text("Next")
