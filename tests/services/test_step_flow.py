# -*- coding: utf-8 -*-
"""
Tests for the step flow controller.

Tests cover:
- Forward and backward transitions per entry variant
- Validation gating
- Variant locking
- Submission and reset
- Progress reporting
"""

import dataclasses

import pytest

from models.submission import EntryVariant
from services.exceptions import InvalidTransition
from services.wizard import FlowState, StepFlowController, StepId, StepValidator, ValidationResult


class AcceptAllValidator(StepValidator):
    """Validator stub that accepts every step."""

    def validate(self, step, snapshot):
        return ValidationResult()


@pytest.fixture
def controller():
    """Create controller that never blocks on validation."""
    return StepFlowController(AcceptAllValidator())


def walk_forward(controller, variant, until):
    """Select variant and move forward until the given step."""
    state = controller.select_variant(controller.initial_state(), variant)
    while state.step is not until:
        result = controller.next_step(state, {})
        assert result.moved is True
        state = result.state
    return state


class TestForwardTransitions:
    """Test forward paths per variant."""

    @pytest.mark.parametrize("variant, expected", [
        (EntryVariant.SINGLE, ["2", "3", "4"]),
        (EntryVariant.MY_FLOORS, ["2", "2a", "3", "4"]),
        (EntryVariant.FULL_BUILDING, ["2", "2b", "4"]),
    ])
    def test_path_per_variant(self, controller, variant, expected):
        """Test the steps visited for each variant."""
        state = controller.select_variant(controller.initial_state(), variant)
        visited = []
        for _ in expected:
            state = controller.next_step(state, {}).state
            visited.append(state.step.value)

        assert visited == expected

    def test_review_has_no_next(self, controller):
        """Test review only leaves through submission."""
        state = walk_forward(controller, EntryVariant.SINGLE, StepId.REVIEW)
        result = controller.next_step(state, {})

        assert result.moved is False
        assert result.state is state

    def test_states_are_replaced_not_mutated(self, controller):
        """Test transitions return new states."""
        state = controller.initial_state()
        result = controller.next_step(state, {})

        assert state.step is StepId.LOCATION
        assert result.state.step is StepId.BUILDING
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.step = StepId.REVIEW


class TestBackwardTransitions:
    """Test backward paths mirror forward paths."""

    def test_my_floors_round_trip(self, controller):
        """Test 2 -> 2a -> back returns to 2."""
        state = walk_forward(controller, EntryVariant.MY_FLOORS, StepId.BUILDING)
        forward = controller.next_step(state, {}).state
        back = controller.previous_step(forward).state

        assert forward.step is StepId.MY_FLOORS
        assert back.step is StepId.BUILDING

    def test_full_building_review_goes_back_to_2b(self, controller):
        """Test review returns to 2b, not 3, for a full building."""
        state = walk_forward(controller, EntryVariant.FULL_BUILDING, StepId.REVIEW)
        assert controller.previous_step(state).state.step is StepId.FULL_BUILDING

    def test_single_review_goes_back_to_contact(self, controller):
        """Test review returns to 3 for a single entry."""
        state = walk_forward(controller, EntryVariant.SINGLE, StepId.REVIEW)
        assert controller.previous_step(state).state.step is StepId.CONTACT

    def test_contact_goes_back_by_variant(self, controller):
        """Test 3 returns to 2a for my floors and to 2 otherwise."""
        my_floors = walk_forward(controller, EntryVariant.MY_FLOORS, StepId.CONTACT)
        single = walk_forward(controller, EntryVariant.SINGLE, StepId.CONTACT)

        assert controller.previous_step(my_floors).state.step is StepId.MY_FLOORS
        assert controller.previous_step(single).state.step is StepId.BUILDING

    def test_no_previous_from_first_step(self, controller):
        """Test step 1 has no previous step."""
        result = controller.previous_step(controller.initial_state())
        assert result.moved is False


class TestValidationGating:
    """Test forward navigation is blocked by validation failures."""

    def test_invalid_step_does_not_move(self):
        """Test empty location keeps the form at step 1 with errors."""
        controller = StepFlowController(StepValidator())
        state = controller.initial_state()

        result = controller.next_step(state, {})

        assert result.moved is False
        assert result.state == state
        assert "sector" in result.validation.field_errors

    def test_back_never_validates(self):
        """Test backward navigation works with invalid data."""
        controller = StepFlowController(StepValidator())
        state = FlowState(step=StepId.CONTACT)

        assert controller.previous_step(state).moved is True


class TestVariantLock:
    """Test the variant cannot change once the branch is taken."""

    def test_variant_changes_freely_before_branch(self, controller):
        """Test choosing again at step 2 is allowed."""
        state = walk_forward(controller, EntryVariant.MY_FLOORS, StepId.BUILDING)
        state = controller.select_variant(state, EntryVariant.FULL_BUILDING)

        assert state.variant is EntryVariant.FULL_BUILDING
        assert state.variant_locked is False

    def test_variant_locked_after_leaving_step_2(self, controller):
        """Test a different variant is refused after the branch."""
        state = walk_forward(controller, EntryVariant.MY_FLOORS, StepId.MY_FLOORS)
        back = controller.previous_step(state).state

        assert back.variant_locked is True
        with pytest.raises(InvalidTransition):
            controller.select_variant(back, EntryVariant.SINGLE)

    def test_same_variant_is_accepted(self, controller):
        """Test re-selecting the locked variant is a no-op."""
        state = walk_forward(controller, EntryVariant.MY_FLOORS, StepId.MY_FLOORS)
        assert controller.select_variant(state, EntryVariant.MY_FLOORS) is state


class TestSubmitAndReset:
    """Test the terminal state."""

    def test_submit_only_from_review(self, controller, make_submission):
        """Test submitting before review is refused."""
        state = walk_forward(controller, EntryVariant.SINGLE, StepId.CONTACT)
        stored = dataclasses.replace(make_submission(), key="submission_1")
        with pytest.raises(InvalidTransition):
            controller.mark_submitted(state, stored)

    def test_submit_requires_stored_submission(self, controller, make_submission):
        """Test review cannot reach Submitted with an unsaved submission."""
        state = walk_forward(controller, EntryVariant.SINGLE, StepId.REVIEW)

        with pytest.raises(InvalidTransition):
            controller.mark_submitted(state, make_submission())
        with pytest.raises(InvalidTransition):
            controller.mark_submitted(state, None)

    def test_submit_requires_matching_variant(self, controller, make_submission):
        """Test the stored submission must have the form's variant."""
        state = walk_forward(controller, EntryVariant.MY_FLOORS, StepId.REVIEW)
        stored = dataclasses.replace(make_submission(EntryVariant.SINGLE), key="submission_1")

        with pytest.raises(InvalidTransition):
            controller.mark_submitted(state, stored)

    def test_reset_only_after_submission(self, controller):
        """Test reset is refused mid-form."""
        with pytest.raises(InvalidTransition):
            controller.reset(FlowState(step=StepId.REVIEW))

    def test_reset_clears_variant(self, controller, make_submission):
        """Test reset returns to step 1 with the variant unlocked."""
        state = walk_forward(controller, EntryVariant.FULL_BUILDING, StepId.REVIEW)
        stored = dataclasses.replace(
            make_submission(EntryVariant.FULL_BUILDING), key="submission_1"
        )
        submitted = controller.mark_submitted(state, stored)
        fresh = controller.reset(submitted)

        assert submitted.step is StepId.SUBMITTED
        assert fresh == FlowState()
        assert fresh.variant_locked is False

    def test_flow_state_round_trips_through_dict(self):
        """Test flow state serialisation for drafts."""
        state = FlowState(StepId.MY_FLOORS, EntryVariant.MY_FLOORS, True)
        assert FlowState.from_dict(state.to_dict()) == state


class TestProgress:
    """Test progress reporting."""

    @pytest.mark.parametrize("step, number, percent", [
        (StepId.LOCATION, 1, 25.0),
        (StepId.BUILDING, 2, 50.0),
        (StepId.MY_FLOORS, 2, 50.0),
        (StepId.FULL_BUILDING, 2, 50.0),
        (StepId.CONTACT, 3, 75.0),
        (StepId.REVIEW, 4, 100.0),
    ])
    def test_progress_per_step(self, controller, step, number, percent):
        """Test step number and percentage per step."""
        progress = controller.progress(FlowState(step=step))

        assert progress.step_number == number
        assert progress.total_steps == 4
        assert progress.percent == percent

    def test_sub_step_text(self, controller):
        """Test sub-steps read as step 2 of 4."""
        progress = controller.progress(FlowState(step=StepId.FULL_BUILDING))
        assert progress.text == "الخطوة 2 من 4"
