# -*- coding: utf-8 -*-
"""
Step Flow Controller - navigation state machine of the survey form.

Handles:
- Step progression (next/previous) branching on the entry variant
- Step validation before forward navigation
- Progress tracking
- Variant locking once the branch point has been passed

The controller holds no navigation state itself: every operation takes a
FlowState and returns a new one.
"""

from dataclasses import dataclass, replace, field
from typing import Any, Dict, Optional

from app.config import Config
from models.submission import EntryVariant, Submission
from services.exceptions import InvalidTransition
from services.translation_manager import tr
from utils.logger import get_logger
from .step_validator import StepValidator, ValidationResult
from .steps import StepId

logger = get_logger(__name__)


@dataclass(frozen=True)
class FlowState:
    """Immutable navigation state of one form session."""
    step: StepId = StepId.LOCATION
    variant: EntryVariant = EntryVariant.SINGLE
    variant_locked: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step": self.step.value,
            "variant": self.variant.value,
            "variant_locked": self.variant_locked,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlowState":
        return cls(
            step=StepId(data.get("step", StepId.LOCATION.value)),
            variant=EntryVariant(data.get("variant", EntryVariant.SINGLE.value)),
            variant_locked=bool(data.get("variant_locked", False)),
        )


@dataclass(frozen=True)
class Progress:
    """Progress bar data."""
    step_number: int
    total_steps: int
    percent: float
    text: str


@dataclass(frozen=True)
class NavigationResult:
    """Outcome of a navigation request."""
    state: FlowState
    moved: bool
    validation: ValidationResult = field(default_factory=ValidationResult)


class StepFlowController:
    """
    Decides step order from the chosen entry variant.

    Forward:
        1 -> 2; 2 -> 3 | 2a | 2b (by variant); 2a -> 3; 2b -> 4; 3 -> 4
    Backward mirrors forward:
        2a -> 2; 2b -> 2; 3 -> 2a (my floors) else 2; 4 -> 2b (full building) else 3
    """

    def __init__(self, validator: Optional[StepValidator] = None,
                 total_steps: int = Config.TOTAL_STEPS):
        self.validator = validator or StepValidator()
        self.total_steps = total_steps

    def initial_state(self) -> FlowState:
        return FlowState()

    # =========================================================================
    # Variant
    # =========================================================================

    def select_variant(self, state: FlowState, variant: EntryVariant) -> FlowState:
        """
        Choose the entry variant (allowed until the branch at step 2 is taken).

        Raises:
            InvalidTransition: if the variant is already locked to another value
        """
        variant = EntryVariant(variant)
        if variant is state.variant:
            return state
        if state.variant_locked:
            raise InvalidTransition(
                f"Entry variant is locked to '{state.variant.label}' for this session"
            )
        logger.debug(f"Entry variant: {state.variant.value} → {variant.value}")
        return replace(state, variant=variant)

    # =========================================================================
    # Navigation
    # =========================================================================

    def next_step(self, state: FlowState, snapshot: Dict[str, Any]) -> NavigationResult:
        """
        Validate the current step and move forward.

        Args:
            state: Current flow state
            snapshot: Form values to validate

        Returns:
            NavigationResult; on validation failure the state is unchanged
            and the result carries the errors
        """
        target = self._forward_target(state)
        if target is None:
            logger.debug(f"Cannot go next from step {state.step.value}")
            return NavigationResult(state=state, moved=False)

        logger.debug(f"Validating step {state.step.value}...")
        validation = self.validator.validate(state.step, snapshot)
        if not validation.is_valid:
            logger.warning(
                f"Step {state.step.value} validation failed: {validation.errors}"
            )
            return NavigationResult(state=state, moved=False, validation=validation)

        new_state = replace(state, step=target)
        if state.step is StepId.BUILDING:
            # The branch is taken here; the variant cannot change afterwards
            new_state = replace(new_state, variant_locked=True)

        logger.info(f"Navigating: Step {state.step.value} → {target.value}")
        return NavigationResult(state=new_state, moved=True, validation=validation)

    def previous_step(self, state: FlowState) -> NavigationResult:
        """Move back one step (never validates)."""
        target = self._backward_target(state)
        if target is None:
            logger.debug(f"Cannot go previous from step {state.step.value}")
            return NavigationResult(state=state, moved=False)

        logger.info(f"Navigating back: Step {state.step.value} → {target.value}")
        return NavigationResult(state=replace(state, step=target), moved=True)

    def mark_submitted(self, state: FlowState, stored: Submission) -> FlowState:
        """
        Move from review to the terminal Submitted state.

        Args:
            state: Current flow state
            stored: The submission as returned by the store (carries its key)

        Raises:
            InvalidTransition: if the form is not at the review step or the
                submission was never stored
        """
        if state.step is not StepId.REVIEW:
            raise InvalidTransition(
                f"Cannot submit from step {state.step.value}; review step required"
            )
        if stored is None or not stored.key:
            raise InvalidTransition("Submitted state requires a stored submission")
        if stored.variant is not state.variant:
            raise InvalidTransition(
                f"Stored submission is '{stored.variant.label}', form is '{state.variant.label}'"
            )
        logger.info(f"Form submitted as {stored.key}")
        return replace(state, step=StepId.SUBMITTED)

    def reset(self, state: FlowState) -> FlowState:
        """
        Start over at step 1 with the variant cleared and unlocked.

        Raises:
            InvalidTransition: if the form has not been submitted
        """
        if state.step is not StepId.SUBMITTED:
            raise InvalidTransition(
                f"Reset is only possible after submission (current step {state.step.value})"
            )
        logger.info("Form reset to step 1")
        return self.initial_state()

    def _forward_target(self, state: FlowState) -> Optional[StepId]:
        step = state.step
        if step is StepId.LOCATION:
            return StepId.BUILDING
        if step is StepId.BUILDING:
            if state.variant is EntryVariant.MY_FLOORS:
                return StepId.MY_FLOORS
            if state.variant is EntryVariant.FULL_BUILDING:
                return StepId.FULL_BUILDING
            return StepId.CONTACT
        if step is StepId.MY_FLOORS:
            return StepId.CONTACT
        if step in (StepId.FULL_BUILDING, StepId.CONTACT):
            return StepId.REVIEW
        # REVIEW leaves only through submission; SUBMITTED is terminal
        return None

    def _backward_target(self, state: FlowState) -> Optional[StepId]:
        step = state.step
        if step is StepId.BUILDING:
            return StepId.LOCATION
        if step in (StepId.MY_FLOORS, StepId.FULL_BUILDING):
            return StepId.BUILDING
        if step is StepId.CONTACT:
            if state.variant is EntryVariant.MY_FLOORS:
                return StepId.MY_FLOORS
            return StepId.BUILDING
        if step is StepId.REVIEW:
            if state.variant is EntryVariant.FULL_BUILDING:
                return StepId.FULL_BUILDING
            return StepId.CONTACT
        return None

    # =========================================================================
    # Progress
    # =========================================================================

    def progress(self, state: FlowState) -> Progress:
        """
        Progress bar data: sub-steps 2a/2b show "step 2 of 4" at 50%,
        other steps show number/total.
        """
        if state.step.is_entry_step:
            number = 2
            percent = 50.0
        else:
            number = state.step.number
            percent = (number / self.total_steps) * 100.0

        return Progress(
            step_number=number,
            total_steps=self.total_steps,
            percent=percent,
            text=tr("progress.step_of", step=number, total=self.total_steps),
        )
