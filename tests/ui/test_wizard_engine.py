# -*- coding: utf-8 -*-
"""
Tests for WizardEngine.

Tests cover:
- Guarded forward navigation
- Unguarded backward navigation
- Boundaries
- on_enter() and set_active() notifications
- Reset
"""

import pytest

from ui.wizards.framework import WizardEngine, WizardStep, StepValidationResult, WizardContext


class RecordingStep(WizardStep):
    """Step that records every call made on it into a shared log."""

    def __init__(self, name, log, valid=True):
        self.name = name
        self.log = log
        self.valid = valid
        self.content = object()

    def get_content(self):
        return self.content

    def validate(self):
        self.log.append((self.name, "validate"))
        return self.valid

    def on_enter(self):
        self.log.append((self.name, "on_enter"))

    def reset(self):
        self.log.append((self.name, "reset"))

    def get_title(self):
        return self.name

    def set_active(self, active):
        super().set_active(active)
        self.log.append((self.name, "active" if active else "inactive"))


class SimpleContext(WizardContext):

    @classmethod
    def from_dict(cls, data):
        context = cls()
        cls._restore_base_fields(context, data)
        return context


@pytest.fixture
def log():
    return []


@pytest.fixture
def steps(log):
    return [RecordingStep(name, log) for name in ("A", "B", "C")]


@pytest.fixture
def engine(qapp, steps, log):
    """Three-step engine with the construction calls cleared from the log."""
    engine = WizardEngine()
    for step in steps:
        engine.add_step(step)
    log.clear()
    return engine


def calls(log, action):
    return [name for name, recorded in log if recorded == action]


class TestAddStep:
    """Test building the step list."""

    def test_only_first_step_starts_active(self, engine, steps):
        assert [s.is_active() for s in steps] == [True, False, False]

    def test_step_added_signal(self, qapp, log):
        engine = WizardEngine()
        added = []
        engine.step_added.connect(added.append)

        step = RecordingStep("A", log)
        engine.add_step(step)

        assert added == [step]
        assert engine.get_total_steps() == 1

    def test_current_step_without_steps_raises(self, qapp):
        with pytest.raises(IndexError):
            WizardEngine().get_current_step()

    def test_navigation_without_steps_is_refused(self, qapp):
        engine = WizardEngine()
        assert engine.next_step() is False
        assert engine.previous_step() is False
        assert engine.get_progress_percentage() == 0.0


class TestScenarios:
    """Three-step wizard A, B, C."""

    def test_start(self, engine, steps):
        assert engine.get_current_step_index() == 0
        assert engine.get_current_step() is steps[0]
        assert engine.is_first_step()
        assert not engine.is_last_step()

    def test_next_with_valid_step(self, engine, steps, log):
        assert engine.next_step() is True

        assert engine.get_current_step_index() == 1
        assert engine.get_current_step() is steps[1]
        assert calls(log, "on_enter") == ["B"]
        assert log == [
            ("A", "validate"),
            ("A", "inactive"),
            ("B", "active"),
            ("B", "on_enter"),
        ]

    def test_next_with_invalid_step(self, engine, steps, log):
        engine.next_step()
        steps[1].valid = False
        log.clear()

        assert engine.next_step() is False

        assert engine.get_current_step_index() == 1
        assert log == [("B", "validate")]
        assert steps[1].is_active()

    def test_previous_ignores_validation(self, engine, steps, log):
        engine.next_step()
        steps[1].valid = False
        log.clear()

        assert engine.previous_step() is True

        assert engine.get_current_step_index() == 0
        assert calls(log, "validate") == []
        assert calls(log, "on_enter") == ["A"]
        assert steps[0].is_active() and not steps[1].is_active()

    def test_next_at_last_step(self, engine, steps, log):
        engine.next_step()
        engine.next_step()
        log.clear()

        assert engine.is_last_step()
        assert engine.next_step() is False

        assert engine.get_current_step_index() == 2
        assert log == []

    def test_reset(self, engine, steps, log):
        engine.next_step()
        engine.next_step()
        log.clear()

        engine.reset()

        assert engine.get_current_step_index() == 0
        assert calls(log, "reset") == ["A", "B", "C"]
        assert log[-1] == ("A", "on_enter")
        assert [s.is_active() for s in steps] == [True, False, False]


class TestBoundaries:
    """Test first/last step edges and progress."""

    def test_previous_at_first_step(self, engine, log):
        assert engine.previous_step() is False
        assert engine.get_current_step_index() == 0
        assert log == []

    def test_can_go_flags(self, engine):
        assert engine.can_go_next() and not engine.can_go_previous()
        engine.next_step()
        engine.next_step()
        assert not engine.can_go_next() and engine.can_go_previous()

    def test_progress_percentage(self, engine):
        assert engine.get_progress_percentage() == 0.0
        engine.next_step()
        assert engine.get_progress_percentage() == 50.0
        engine.next_step()
        assert engine.get_progress_percentage() == 100.0

    def test_single_step_progress(self, qapp, log):
        engine = WizardEngine()
        engine.add_step(RecordingStep("A", log))
        assert engine.is_first_step() and engine.is_last_step()
        assert engine.get_progress_percentage() == 100.0


class TestProperties:
    """Invariants that hold for any navigation sequence."""

    def test_exactly_one_active_step(self, engine, steps):
        for move in ("next", "next", "previous", "next", "previous", "previous"):
            getattr(engine, f"{move}_step")()
            active = [s for s in steps if s.is_active()]
            assert active == [engine.get_current_step()]

    def test_index_changes_by_at_most_one(self, engine):
        seen = []
        engine.step_changed.connect(lambda old, new: seen.append((old, new)))

        engine.next_step()
        engine.next_step()
        engine.previous_step()

        assert seen == [(0, 1), (1, 2), (2, 1)]

    def test_on_enter_never_called_on_left_step(self, engine, log):
        engine.next_step()
        engine.previous_step()
        assert calls(log, "on_enter") == ["B", "A"]

    def test_reset_twice_is_same_as_once(self, engine, steps, log):
        engine.next_step()
        engine.reset()
        log.clear()

        engine.reset()

        assert engine.get_current_step_index() == 0
        assert calls(log, "reset") == ["A", "B", "C"]
        assert log[-1] == ("A", "on_enter")


class TestValidationResults:
    """Test non-boolean validation results and signals."""

    def test_failed_result_is_emitted(self, engine, steps):
        failed = StepValidationResult(is_valid=False, errors=["Missing"])
        steps[0].valid = failed
        emitted = []
        engine.validation_failed.connect(emitted.append)

        assert engine.next_step() is False
        assert emitted == [failed]

    def test_valid_result_advances(self, engine, steps):
        steps[0].valid = StepValidationResult(is_valid=True, errors=[])
        assert engine.next_step() is True

    def test_reset_signals(self, engine):
        changed, resets = [], []
        engine.step_changed.connect(lambda old, new: changed.append((old, new)))
        engine.wizard_reset.connect(lambda: resets.append(True))

        engine.next_step()
        engine.reset()

        assert changed[-1] == (1, 0)
        assert resets == [True]

    def test_validate_exception_propagates(self, engine, steps):
        def boom():
            raise RuntimeError("broken step")

        steps[0].validate = boom
        with pytest.raises(RuntimeError):
            engine.next_step()
        assert engine.get_current_step_index() == 0


class TestContextTracking:
    """Test the optional wizard context."""

    def test_context_follows_navigation(self, qapp, log):
        context = SimpleContext()
        engine = WizardEngine(context)
        for name in ("A", "B", "C"):
            engine.add_step(RecordingStep(name, log))

        engine.next_step()
        engine.next_step()
        assert context.current_step_index == 2
        assert context.completed_steps == {0, 1}

        engine.previous_step()
        assert context.current_step_index == 1

        engine.reset()
        assert context.current_step_index == 0
        assert context.completed_steps == set()

    def test_reference_number_prefix(self):
        context = SimpleContext()
        assert context.reference_number.startswith("WIZ-")
        assert SimpleContext.from_dict(context.to_dict()).reference_number == context.reference_number

    def test_shared_data(self):
        context = SimpleContext()
        before = context.updated_at

        context.update_data("source", "phone")

        assert context.get_data("source") == "phone"
        assert context.get_data("missing", "n/a") == "n/a"
        assert context.updated_at >= before
        assert SimpleContext.from_dict(context.to_dict()).get_data("source") == "phone"
