"""
Tests for the pure phase transition function.
"""

import pytest

from drinkmatch.flow.state import (
    INITIAL_STATE,
    AppState,
    Complete,
    ExitQuiz,
    InvalidTransition,
    Phase,
    Resolved,
    Restart,
    Start,
    transition,
)


def _displaying(complete_answers, sample_result) -> AppState:
    state = transition(INITIAL_STATE, Start())
    state = transition(state, Complete(answers=complete_answers))
    return transition(state, Resolved(result=sample_result))


class TestPhaseEnum:
    """Test Phase enum values."""

    def test_values(self):
        assert Phase.LANDING.value == "landing"
        assert Phase.COLLECTING.value == "collecting"
        assert Phase.GENERATING.value == "generating"
        assert Phase.DISPLAYING.value == "displaying"

    def test_initial_state(self):
        assert INITIAL_STATE.phase == Phase.LANDING
        assert INITIAL_STATE.answers is None
        assert INITIAL_STATE.result is None


class TestTransitions:
    """Test the allowed transitions."""

    def test_start(self):
        assert transition(INITIAL_STATE, Start()).phase == Phase.COLLECTING

    def test_exit_quiz_returns_to_landing(self):
        state = transition(INITIAL_STATE, Start())
        assert transition(state, ExitQuiz()) == INITIAL_STATE

    def test_complete_copies_answers(self, complete_answers):
        state = transition(INITIAL_STATE, Start())
        state = transition(state, Complete(answers=complete_answers))

        assert state.phase == Phase.GENERATING
        assert dict(state.answers) == complete_answers

        complete_answers["budget"] = "Premium"
        assert state.answers["budget"] == "Moderate"

    def test_answers_read_only(self, complete_answers):
        state = transition(transition(INITIAL_STATE, Start()), Complete(answers=complete_answers))
        with pytest.raises(TypeError):
            state.answers["budget"] = "Premium"

    def test_resolved_displays_result(self, complete_answers, sample_result):
        state = _displaying(complete_answers, sample_result)
        assert state.phase == Phase.DISPLAYING
        assert state.result == sample_result

    def test_restart_clears_everything(self, complete_answers, sample_result):
        state = transition(_displaying(complete_answers, sample_result), Restart())
        assert state.phase == Phase.LANDING
        assert state.answers is None
        assert state.result is None

    def test_cycles_indefinitely(self, complete_answers, sample_result):
        state = INITIAL_STATE
        for _ in range(3):
            state = transition(state, Start())
            state = transition(state, Complete(answers=complete_answers))
            state = transition(state, Resolved(result=sample_result))
            assert state.phase == Phase.DISPLAYING
            state = transition(state, Restart())
            assert state == INITIAL_STATE

    def test_input_state_unchanged(self):
        before = AppState()
        transition(before, Start())
        assert before.phase == Phase.LANDING


class TestInvalidTransitions:
    """Test events that make no sense in the current phase."""

    def test_cannot_start_while_generating(self, complete_answers):
        state = transition(transition(INITIAL_STATE, Start()), Complete(answers=complete_answers))
        with pytest.raises(InvalidTransition, match="Start while generating"):
            transition(state, Start())

    def test_cannot_restart_while_generating(self, complete_answers):
        state = transition(transition(INITIAL_STATE, Start()), Complete(answers=complete_answers))
        with pytest.raises(InvalidTransition):
            transition(state, Restart())

    def test_cannot_resolve_without_generation(self, sample_result):
        with pytest.raises(InvalidTransition):
            transition(INITIAL_STATE, Resolved(result=sample_result))

    def test_cannot_complete_from_landing(self, complete_answers):
        with pytest.raises(InvalidTransition):
            transition(INITIAL_STATE, Complete(answers=complete_answers))

    def test_error_carries_context(self):
        with pytest.raises(InvalidTransition) as exc_info:
            transition(INITIAL_STATE, Restart())
        assert exc_info.value.phase == Phase.LANDING
        assert isinstance(exc_info.value.event, Restart)


class TestToDict:
    def test_serializes_result(self, complete_answers, sample_result):
        data = _displaying(complete_answers, sample_result).to_dict()
        assert data["phase"] == "displaying"
        assert data["answers"] == complete_answers
        assert data["result"]["drink_name"] == "Aperol Spritz"
