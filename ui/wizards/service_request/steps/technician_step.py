# -*- coding: utf-8 -*-
"""
Technician Step - Step 5 of the Service Request Wizard.

Technicians are optional; the assigned list is committed as-is.
"""

from typing import List

from PyQt5.QtWidgets import QHBoxLayout, QListWidget, QListWidgetItem, QAbstractItemView
from PyQt5.QtCore import Qt

from models.technician import Technician
from ui.components.action_button import ActionButton
from ui.components.autocomplete_field import AutoCompleteField
from ui.wizards.framework import BaseStep, StepValidationResult
from ui.wizards.service_request.service_request_context import ServiceRequestContext
from utils.logger import get_logger

logger = get_logger(__name__)


class TechnicianStep(BaseStep):
    """Step 5: who does the work."""

    def __init__(self, context: ServiceRequestContext, parent=None):
        super().__init__(context, parent)
        self._assigned: List[Technician] = []

    def get_title(self) -> str:
        return "Technician Assignment"

    def get_description(self) -> str:
        return "Please assign technicians to this service request."

    def setup_ui(self):
        self.add_title_section()

        form = self.add_card()
        picker_row = QHBoxLayout()
        self.technician_input = AutoCompleteField(
            self.context.technicians,
            display=lambda t: t.display_name,
            placeholder="Type a technician name"
        )
        picker_row.addWidget(self.technician_input, 1)
        self.assign_button = ActionButton("Assign", variant="primary", width=100)
        self.assign_button.clicked.connect(self.assign_selected)
        picker_row.addWidget(self.assign_button)
        form.addRow("Select Technician:", picker_row)

        assigned_form = self.add_card("Assigned Technicians")
        self.assigned_list = QListWidget()
        self.assigned_list.setSelectionMode(QAbstractItemView.ExtendedSelection)
        assigned_form.addRow(self.assigned_list)

        remove_row = QHBoxLayout()
        remove_row.addStretch()
        self.remove_button = ActionButton("Remove Selected", variant="outline", width=150)
        self.remove_button.clicked.connect(self.remove_selected)
        remove_row.addWidget(self.remove_button)
        assigned_form.addRow(remove_row)

    def populate_data(self):
        self._assigned = list(self.context.request.technicians)
        self._refresh_list()

    def assigned_technicians(self) -> List[Technician]:
        return list(self._assigned)

    def assign(self, technician: Technician) -> bool:
        """Add a technician unless one with the same id is already assigned."""
        if any(t.technician_id == technician.technician_id for t in self._assigned):
            return False
        self._assigned.append(technician)
        self._refresh_list()
        return True

    def assign_selected(self):
        technician = self.technician_input.get_selected_item()
        if technician is None:
            return
        if self.assign(technician):
            logger.debug(f"Assigned technician {technician.technician_id}")
        self.technician_input.reset()

    def remove_selected(self):
        selected_ids = {
            item.data(Qt.UserRole) for item in self.assigned_list.selectedItems()
        }
        if not selected_ids:
            return
        self._assigned = [t for t in self._assigned if t.technician_id not in selected_ids]
        self._refresh_list()

    def _refresh_list(self):
        self.assigned_list.clear()
        for technician in self._assigned:
            item = QListWidgetItem(technician.display_name)
            item.setData(Qt.UserRole, technician.technician_id)
            self.assigned_list.addItem(item)

    def validate_step(self) -> StepValidationResult:
        self.context.request.technicians = list(self._assigned)
        return self.create_validation_result()

    def reset_step(self):
        self.technician_input.reset()
        self._assigned = []
        self._refresh_list()
        self.context.request.technicians = []
