import pytest

from infra.errors import MissingKeyError
from state.test_state import assign_path, new_test_state, resolve_path


def test_new_test_state_starts_empty() -> None:
    assert new_test_state() == {
        "speakCalls": [],
        "recognitionStartCalls": 0,
        "recognitionStopCalls": 0,
        "getUserMediaCalls": 0,
    }


def test_length_accessor_counts_sequence_items() -> None:
    state = new_test_state()
    state["speakCalls"].extend(["a", "b"])
    assert resolve_path(state, "speakCalls.length") == 2


def test_assign_path_sets_nested_keys() -> None:
    state = new_test_state()
    state["nested"] = {"inner": {"flag": False}}
    assign_path(state, "nested.inner.flag", True)
    assert resolve_path(state, "nested.inner.flag") is True


def test_missing_key_is_a_lookup_failure() -> None:
    state = new_test_state()
    with pytest.raises(MissingKeyError):
        resolve_path(state, "nope")
    with pytest.raises(KeyError):
        assign_path(state, "missing.child", 1)


def test_assign_through_non_object_fails() -> None:
    state = new_test_state()
    with pytest.raises(MissingKeyError):
        assign_path(state, "recognitionStartCalls.value", 1)
