# -*- coding: utf-8 -*-
"""
Wizard Engine - Linear navigation over a fixed list of wizard steps.

Handles:
- Step progression (next/previous) gated by the current step's validate()
- Visibility notifications (set_active) and on_enter() calls
- Reset back to the first step
- Progress tracking
"""

from typing import List, Optional
from PyQt5.QtCore import QObject, pyqtSignal

from .base_step import WizardStep
from .wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardEngine(QObject):
    """
    Linear state machine over an ordered list of steps.

    Steps must all be added before navigation begins; adding a step later
    is not checked.

    The engine performs no I/O and never shows or hides anything itself:
    steps are told via set_active() and hosts listen to the signals.
    """

    # Signals
    step_added = pyqtSignal(object)  # step
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    validation_failed = pyqtSignal(object)  # falsy validate() result
    wizard_reset = pyqtSignal()

    def __init__(self, context: Optional[WizardContext] = None, parent: Optional[QObject] = None):
        """
        Args:
            context: Optional wizard context that mirrors the current index
                and tracks completed steps
            parent: Parent QObject
        """
        super().__init__(parent)
        self.context = context
        self.steps: List[WizardStep] = []
        self.current_index = 0

    def add_step(self, step: WizardStep):
        """Append a step. Only the first step starts active."""
        self.steps.append(step)
        self.step_added.emit(step)
        step.set_active(len(self.steps) == 1)
        logger.debug(f"Added step {len(self.steps) - 1}: {step.get_title()}")

    # =========================================================================
    # Accessors
    # =========================================================================

    def get_current_step(self) -> WizardStep:
        """
        Raises:
            IndexError: if no step has been added
        """
        if not self.steps:
            raise IndexError("Wizard has no steps")
        return self.steps[self.current_index]

    def get_current_step_index(self) -> int:
        return self.current_index

    def get_total_steps(self) -> int:
        return len(self.steps)

    def is_first_step(self) -> bool:
        return self.current_index == 0

    def is_last_step(self) -> bool:
        return self.current_index == len(self.steps) - 1

    def can_go_next(self) -> bool:
        """Check if there is a step after the current one."""
        return self.current_index < len(self.steps) - 1

    def can_go_previous(self) -> bool:
        """Check if there is a step before the current one."""
        return self.current_index > 0

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if len(self.steps) == 0:
            return 0.0
        if len(self.steps) == 1:
            return 100.0
        return (self.current_index / (len(self.steps) - 1)) * 100.0

    # =========================================================================
    # Navigation
    # =========================================================================

    def next_step(self) -> bool:
        """
        Validate the current step and move forward.

        Returns:
            True if navigation was successful
        """
        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self.current_index})")
            return False

        current_step = self.steps[self.current_index]
        result = current_step.validate()
        if not result:
            logger.warning(
                f"Step {self.current_index} ({current_step.get_title()}) validation failed: "
                f"{getattr(result, 'errors', [])}"
            )
            self.validation_failed.emit(result)
            return False

        if self.context is not None:
            self.context.mark_step_completed(self.current_index)

        logger.info(f"Navigating: Step {self.current_index} → {self.current_index + 1}")
        self._navigate_to(self.current_index + 1)
        return True

    def previous_step(self) -> bool:
        """Move back one step. Never validates."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_index})")
            return False

        logger.info(f"Navigating back: Step {self.current_index} → {self.current_index - 1}")
        self._navigate_to(self.current_index - 1)
        return True

    def reset(self):
        """
        Clear every step and return to the first one.

        Steps are reset in insertion order; the first step's on_enter()
        is the last call made.
        """
        if not self.steps:
            self.current_index = 0
            self.wizard_reset.emit()
            return

        old_index = self.current_index
        logger.info("Resetting wizard")

        self.steps[old_index].set_active(False)
        for step in self.steps:
            step.reset()

        self.current_index = 0
        if self.context is not None:
            self.context.clear_completed_steps()

        first_step = self.steps[0]
        first_step.set_active(True)
        first_step.on_enter()

        self.step_changed.emit(old_index, 0)
        self.wizard_reset.emit()

    def _navigate_to(self, new_index: int):
        old_index = self.current_index

        self.steps[old_index].set_active(False)

        self.current_index = new_index
        if self.context is not None:
            self.context.current_step_index = new_index

        new_step = self.steps[new_index]
        new_step.set_active(True)
        new_step.on_enter()
        logger.debug(f"Showing step {new_index}: {new_step.get_title()}")

        self.step_changed.emit(old_index, new_index)
