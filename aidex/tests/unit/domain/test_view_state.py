import pytest

from aidex.domain.view_state import ViewPhase, ViewState


def test_view_state_moves_forward_to_ready():
    state = ViewState()
    assert state.phase is ViewPhase.IDLE
    assert not state.loading

    state.start()
    assert state.loading
    assert not state.settled

    state.succeed(["row"])
    assert state.phase is ViewPhase.READY
    assert state.settled
    assert state.data == ["row"]
    assert state.error is None


def test_view_state_failure_keeps_data_unset():
    state = ViewState().start().fail("boom", "CODE")

    assert state.phase is ViewPhase.FAILED
    assert state.error == "boom"
    assert state.error_code == "CODE"
    assert state.data is None
    assert not state.loading


@pytest.mark.parametrize("action", ["start", "succeed", "fail"])
def test_settled_state_rejects_further_transitions(action):
    state = ViewState().start().succeed(1)

    with pytest.raises(RuntimeError):
        if action == "start":
            state.start()
        elif action == "succeed":
            state.succeed(2)
        else:
            state.fail("late")


def test_idle_state_cannot_settle_without_loading():
    with pytest.raises(RuntimeError):
        ViewState().succeed(1)
