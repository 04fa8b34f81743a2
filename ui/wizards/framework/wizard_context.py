# -*- coding: utf-8 -*-
"""
Wizard Context - Base class for wizard session state.

Holds what the steps of one wizard session share:
- Session id, reference number and status
- Current step index and completed steps
- Free-form data
"""

from typing import Dict, Any, Set
from datetime import datetime
from abc import ABC, abstractmethod
import uuid


class WizardContext(ABC):
    """
    Base class for wizard context.

    Subclasses add their domain object and implement from_dict().
    """

    # Reference number prefix; subclasses override
    REFERENCE_PREFIX = "WIZ"

    def __init__(self):
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = "draft"  # draft, completed, cancelled
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.current_step_index: int = 0
        self.reference_number: str = self._generate_reference_number()

        self.completed_steps: Set[int] = set()
        self.data: Dict[str, Any] = {}

    def _generate_reference_number(self) -> str:
        """
        Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        Example: SR-20260118153045-A3F2
        """
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        short_id = self.wizard_id[:4].upper()
        return f"{self.REFERENCE_PREFIX}-{timestamp}-{short_id}"

    def _touch(self):
        self.updated_at = datetime.now()

    def mark_step_completed(self, step_index: int):
        self.completed_steps.add(step_index)
        self._touch()

    def is_step_completed(self, step_index: int) -> bool:
        return step_index in self.completed_steps

    def clear_completed_steps(self):
        self.completed_steps.clear()
        self.current_step_index = 0
        self._touch()

    def update_data(self, key: str, value: Any):
        self.data[key] = value
        self._touch()

    def get_data(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize context to dictionary.

        Subclasses should call super().to_dict() and add their own fields.
        """
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_index": self.current_step_index,
            "completed_steps": sorted(self.completed_steps),
            "data": dict(self.data)
        }

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WizardContext':
        """Restore context from dictionary."""
        pass

    @classmethod
    def _restore_base_fields(cls, context: 'WizardContext', data: Dict[str, Any]):
        """Restore the fields written by WizardContext.to_dict()."""
        context.wizard_id = data.get("wizard_id", context.wizard_id)
        context.reference_number = data.get("reference_number", context.reference_number)
        context.status = data.get("status", "draft")
        context.current_step_index = data.get("current_step_index", 0)
        context.completed_steps = set(data.get("completed_steps", []))
        context.data = dict(data.get("data", {}))

        if "created_at" in data:
            context.created_at = datetime.fromisoformat(data["created_at"])
        if "updated_at" in data:
            context.updated_at = datetime.fromisoformat(data["updated_at"])
