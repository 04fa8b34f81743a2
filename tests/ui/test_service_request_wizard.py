# -*- coding: utf-8 -*-
"""
Tests for the Service Request Wizard.

Tests cover:
- Wizard initialization
- Step navigation and validation gating
- Domain object updates per step
- Saving on the review step
- Reset
"""

from datetime import time

import pytest

from models.customer import Customer
from repositories.customer_repository import CustomerRepository
from repositories.service_request_repository import ServiceRequestRepository
from ui.wizards.framework import WizardEngine
from ui.wizards.service_request import ServiceRequestWizard, ServiceRequestContext
from ui.wizards.service_request.steps import (
    CustomerStep,
    ServiceDetailsStep,
    SchedulingStep,
    LocationStep,
    TechnicianStep,
    CostEstimationStep,
    ReviewStep
)


@pytest.fixture
def wizard(qtbot, seeded_db):
    """Create wizard instance for testing."""
    wizard = ServiceRequestWizard(seeded_db, show_dialogs=False)
    qtbot.addWidget(wizard)
    return wizard


def steps(wizard):
    return wizard.engine.steps


def click_next(wizard):
    wizard.footer.btn_next.click()


def complete_customer_step(wizard):
    step = wizard.engine.get_current_step()
    customer = wizard.context.customers[0]
    step.customer_input.set_selected_item(customer)
    click_next(wizard)
    return customer


def complete_details_step(wizard, description="Replace the thermostat"):
    step = wizard.engine.get_current_step()
    step.description_input.setPlainText(description)
    step.service_type_combo.setCurrentText("Repair")
    step.priority_combo.setCurrentText("High")
    click_next(wizard)


def advance_to_review(wizard, pick_customer=True):
    if pick_customer:
        complete_customer_step(wizard)
    else:
        click_next(wizard)
    complete_details_step(wizard)

    scheduling = wizard.engine.get_current_step()
    scheduling.start_time_input.setText("09:00")
    scheduling.end_time_input.setText("11:30")
    click_next(wizard)

    location = wizard.engine.get_current_step()
    location.fill_from_customer()
    click_next(wizard)

    technician_step = wizard.engine.get_current_step()
    technician_step.technician_input.set_selected_item(wizard.context.technicians[0])
    technician_step.assign_selected()
    click_next(wizard)

    cost = wizard.engine.get_current_step()
    cost.service_cost_input.setText("100")
    cost.parking_fees_input.setText("7.50")
    click_next(wizard)


class TestWizardInitialization:
    """Test wizard initialization and setup."""

    def test_wizard_has_seven_steps(self, wizard):
        expected = [
            CustomerStep, ServiceDetailsStep, SchedulingStep, LocationStep,
            TechnicianStep, CostEstimationStep, ReviewStep,
        ]
        assert [type(step) for step in steps(wizard)] == expected

    def test_step_titles(self, wizard):
        assert [step.get_title() for step in steps(wizard)] == [
            "Customer Information",
            "Service Details",
            "Scheduling",
            "Location & Access",
            "Technician Assignment",
            "Cost Estimation",
            "Review & Confirmation",
        ]

    def test_starts_at_first_step(self, wizard):
        assert wizard.engine.get_current_step_index() == 0
        assert wizard.header.progress_label.text() == "Step 1 of 7"
        assert not wizard.footer.btn_previous.isEnabled()
        assert wizard.footer.btn_next.text() == "Next"

    def test_only_current_step_is_visible(self, wizard):
        assert [step.isHidden() for step in steps(wizard)] == [False] + [True] * 6

    def test_context(self, wizard):
        assert isinstance(wizard.context, ServiceRequestContext)
        assert wizard.context.reference_number.startswith("SR-")
        assert wizard.request.ref_no == wizard.context.reference_number
        assert len(wizard.context.customers) == 20
        assert len(wizard.context.technicians) == 8


class TestNavigation:
    """Test moving between steps."""

    def test_customer_required(self, wizard):
        click_next(wizard)

        step = wizard.engine.get_current_step()
        assert wizard.engine.get_current_step_index() == 0
        assert step.has_errors()
        assert step.error_label.text() == "Please select a customer"
        assert wizard.footer.info_text() == wizard.VALIDATION_HINT
        assert wizard.request.customer is None

    def test_customer_step_commits_selection(self, wizard):
        customer = complete_customer_step(wizard)

        assert wizard.engine.get_current_step_index() == 1
        assert wizard.request.customer is customer
        assert wizard.request.customer_id == customer.customer_id
        assert wizard.footer.info_text() == ""
        assert wizard.footer.btn_previous.isEnabled()
        assert [step.isHidden() for step in steps(wizard)][:2] == [True, False]

    def test_description_required(self, wizard):
        complete_customer_step(wizard)
        click_next(wizard)

        assert wizard.engine.get_current_step_index() == 1
        assert wizard.request.description is None

    def test_previous_keeps_entries(self, wizard):
        customer = complete_customer_step(wizard)
        wizard.footer.btn_previous.click()

        step = wizard.engine.get_current_step()
        assert wizard.engine.get_current_step_index() == 0
        assert step.customer_input.get_selected_item() is customer
        assert "Customer #: " + customer.customer_number in step.info_label.text()

    def test_previous_does_not_validate(self, wizard):
        complete_customer_step(wizard)
        details = wizard.engine.get_current_step()
        details.description_input.clear()

        wizard.footer.btn_previous.click()

        assert wizard.engine.get_current_step_index() == 0
        assert not details.has_errors()

    def test_last_step_shows_finish(self, wizard):
        advance_to_review(wizard)
        assert wizard.engine.is_last_step()
        assert wizard.footer.btn_next.text() == "Finish"
        assert wizard.header.progress_bar.value() == 100


class TestSteps:
    """Test the individual step rules through the wizard."""

    def test_time_order_error(self, wizard):
        complete_customer_step(wizard)
        complete_details_step(wizard)
        step = wizard.engine.get_current_step()

        step.start_time_input.setText("17:00")
        step.end_time_input.setText("09:00")
        assert step.time_error() == "Start time cannot be after end time"

        click_next(wizard)
        assert wizard.engine.get_current_step_index() == 2
        assert wizard.request.start_time is None

    def test_time_format_error(self, wizard):
        complete_customer_step(wizard)
        complete_details_step(wizard)
        step = wizard.engine.get_current_step()

        step.start_time_input.setText("9am")
        assert step.time_error() == "Invalid time format (use HH:MM)"

        step.start_time_input.setText("")
        assert step.time_error() == ""

    def test_location_formats(self, wizard):
        complete_customer_step(wizard)
        complete_details_step(wizard)
        click_next(wizard)
        step = wizard.engine.get_current_step()

        step.state_input.setText("T1")
        step.zip_input.setText("1234")
        click_next(wizard)

        assert isinstance(wizard.engine.get_current_step(), LocationStep)
        assert step.error_label.text() == "State should be 2 letters\nInvalid ZIP code format"

    def test_fill_from_customer(self, wizard):
        customer = complete_customer_step(wizard)
        complete_details_step(wizard)
        click_next(wizard)
        step = wizard.engine.get_current_step()

        step.fill_from_customer()

        assert step.city_input.text() == customer.city
        assert step.poc_name_input.text() == customer.full_name

    def test_duplicate_technician_ignored(self, wizard):
        technician = wizard.context.technicians[0]
        step = steps(wizard)[4]

        assert step.assign(technician) is True
        assert step.assign(technician) is False
        assert step.assigned_list.count() == 1

        step.assigned_list.item(0).setSelected(True)
        step.remove_selected()
        assert step.assigned_technicians() == []

    def test_cost_total_and_errors(self, wizard):
        step = steps(wizard)[5]

        step.service_cost_input.setText("100")
        step.added_cost_input.setText("")
        step.parking_fees_input.setText("2.25")
        assert step.total_text() == "$102.25"

        step.added_cost_input.setText("abc")
        result = step.validate()
        assert not result
        assert result.errors == ["Added cost: invalid number format"]
        assert wizard.request.service_cost == 0.0


class TestSubmission:
    """Test the review step and saving."""

    def test_review_summary(self, wizard):
        advance_to_review(wizard)
        review = wizard.engine.get_current_step()

        sections = dict(review.summary_sections())
        customer = wizard.request.customer
        assert sections["Customer"] == f"{customer.full_name} ({customer.customer_number})"
        assert sections["Description"] == "Replace the thermostat"
        assert sections["Cost Estimate"].endswith("Total: $107.50")
        assert review.send_confirmation() is True

    def test_finish_saves_request(self, wizard, seeded_db, qtbot):
        advance_to_review(wizard)

        with qtbot.waitSignal(wizard.wizard_completed) as blocker:
            click_next(wizard)

        saved = ServiceRequestRepository(seeded_db).get_by_id(wizard.request.job_id)
        assert saved is not None
        assert saved.ref_no == wizard.context.reference_number
        assert saved.start_time == time(9, 0)
        assert saved.service_type == "Repair"
        assert saved.total_cost == pytest.approx(107.5)
        assert len(saved.technicians) == 1

        data = blocker.args[0]
        assert data["status"] == "completed"
        assert data["request"]["job_id"] == saved.job_id

    def test_failed_save_stays_on_review(self, qtbot, seeded_db):
        saved = []

        def refuse(request):
            saved.append(request)
            return False

        wizard = ServiceRequestWizard(seeded_db, on_save=refuse, show_dialogs=False)
        qtbot.addWidget(wizard)
        completed = []
        wizard.wizard_completed.connect(completed.append)
        advance_to_review(wizard)

        click_next(wizard)

        assert len(saved) == 1
        assert completed == []
        assert wizard.engine.is_last_step()
        assert wizard.footer.info_text() == wizard.VALIDATION_HINT
        assert wizard.request.job_id is None


class TestReset:
    """Test clearing the wizard."""

    def test_reset_clears_request(self, wizard):
        advance_to_review(wizard)

        wizard.reset_wizard()

        request = wizard.request
        assert wizard.engine.get_current_step_index() == 0
        assert request.customer is None
        assert request.customer_id == 0
        assert request.description is None
        assert request.service_date is None
        assert request.service_address is None
        assert request.technicians == []
        assert request.service_cost == 0.0
        assert wizard.context.completed_steps == set()
        assert request.ref_no == wizard.context.reference_number
        assert request.job_id is None
        assert wizard.context.status == "draft"
        assert steps(wizard)[0].customer_input.text() == ""
        assert steps(wizard)[1].description_input.toPlainText() == ""


class TestPreselectedCustomer:

    def test_customer_shown_and_accepted(self, qtbot, seeded_db):
        customer = CustomerRepository(seeded_db).get_all()[3]
        wizard = ServiceRequestWizard(seeded_db, customer=customer, show_dialogs=False)
        qtbot.addWidget(wizard)

        step = wizard.engine.get_current_step()
        assert step.customer_input.text() == customer.display_name

        click_next(wizard)
        assert wizard.engine.get_current_step_index() == 1
        assert wizard.request.customer_id == customer.customer_id


class TestCancel:

    def test_cancel_emits_and_marks_context(self, wizard, qtbot):
        with qtbot.waitSignal(wizard.wizard_cancelled):
            wizard.footer.btn_cancel.click()

        assert wizard.context.status == "cancelled"

    def test_cancel_declined(self, qtbot, seeded_db, monkeypatch):
        monkeypatch.setattr(
            "ui.wizards.service_request.service_request_wizard.ErrorHandler.confirm",
            lambda *args: False
        )
        wizard = ServiceRequestWizard(seeded_db)
        qtbot.addWidget(wizard)
        cancelled = []
        wizard.wizard_cancelled.connect(lambda: cancelled.append(True))

        wizard.footer.btn_cancel.click()

        assert cancelled == []
        assert wizard.context.status == "draft"


class TestFailedSave:

    def test_database_error_leaves_request_unchanged(self, qtbot, seeded_db):
        missing = Customer(customer_id=999999, customer_number="C-9999",
                           first_name="Gone", last_name="Away")
        wizard = ServiceRequestWizard(seeded_db, customer=missing, show_dialogs=False)
        qtbot.addWidget(wizard)
        advance_to_review(wizard, pick_customer=False)

        request = wizard.request
        review = wizard.engine.get_current_step()
        review.notes_input.setPlainText("Ring twice")
        before = (request.status, request.created_at, request.updated_at, request.service_notes)

        click_next(wizard)

        assert wizard.engine.is_last_step()
        assert wizard.last_result['success'] is False
        assert wizard.last_result['error'].startswith('Database error')
        assert (request.status, request.created_at, request.updated_at,
                request.service_notes) == before
        assert request.job_id is None
        assert ServiceRequestRepository(seeded_db).count() == 0


class TestContextSerialization:

    def test_round_trip_without_database(self, seeded_db):
        context = ServiceRequestContext(seeded_db)
        context.request.customer = context.customers[0]
        context.request.customer_id = context.customers[0].customer_id
        context.request.description = "Replace filters"
        context.request.start_time = time(8, 30)
        context.request.technicians = context.technicians[:2]
        context.mark_step_completed(0)

        restored = ServiceRequestContext.from_dict(context.to_dict())

        assert restored.reference_number == context.reference_number
        assert restored.completed_steps == {0}
        assert restored.customers == []
        assert restored.request.description == "Replace filters"
        assert restored.request.start_time == time(8, 30)
        assert restored.request.customer.customer_number == context.customers[0].customer_number
        assert [t.technician_id for t in restored.request.technicians] == \
            [t.technician_id for t in context.technicians[:2]]

    def test_round_trip_reloads_lookups(self, seeded_db):
        context = ServiceRequestContext(seeded_db)
        restored = ServiceRequestContext.from_dict(context.to_dict(), db=seeded_db)
        assert len(restored.customers) == 20
        assert restored.request.ref_no == context.reference_number


class TestStepsWithoutHost:
    """Steps driven by a bare engine build their UI on first use."""

    @pytest.fixture
    def engine(self, qtbot, seeded_db):
        context = ServiceRequestContext(seeded_db)
        engine = WizardEngine(context)
        for step in (CustomerStep(context), ServiceDetailsStep(context)):
            qtbot.addWidget(step)
            engine.add_step(step)
        return engine

    def test_next_step_validates_unbuilt_step(self, engine):
        assert engine.next_step() is False
        assert engine.get_current_step().error_label.text() == "Please select a customer"

    def test_reset_unbuilt_steps(self, engine):
        engine.reset()

        assert engine.get_current_step_index() == 0
        assert engine.steps[1].description_input.toPlainText() == ""
        assert engine.context.request.description is None

    def test_advance_after_selection(self, engine):
        first = engine.get_current_step()
        first.initialize()
        first.customer_input.set_selected_item(engine.context.customers[0])

        assert engine.next_step() is True
        assert engine.steps[1].priority_combo.currentText() == "Medium"
