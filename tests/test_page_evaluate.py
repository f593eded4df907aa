import pytest

from browser.page import PageStub
from dom.elements import ElementState
from infra.config import Settings
from infra.errors import MissingKeyError, UnsupportedExpressionError

USER_LISTENING = """() => document.querySelector('[data-role="user"]').classList.contains('is-listening')"""


@pytest.fixture
def page() -> PageStub:
    stub = PageStub(settings=Settings(function_poll_interval_s=0.005, selector_poll_interval_s=0.005))
    stub.goto("AI/index.html")
    return stub


def test_assignment_round_trip_through_length(page: PageStub) -> None:
    page.evaluate("window.__testState.speakCalls = []")
    assert page.evaluate("window.__testState.speakCalls.length") == 0
    page.app.speak("hi")
    assert page.evaluate("() => window.__testState.speakCalls.length") == 1


@pytest.mark.parametrize(
    ("literal", "expected"),
    [("true", True), ("7", 7), ("'text'", "text"), ('"text"', "text"), ("raw", "raw")],
)
def test_assignment_literals(page: PageStub, literal: str, expected: object) -> None:
    assert page.evaluate(f"window.__testState.custom = {literal}") is None
    assert page.evaluate("window.__testState.custom") == expected


def test_class_membership_flips_after_unmute(page: PageStub) -> None:
    assert page.evaluate(USER_LISTENING) is False
    page.evaluate("setMutedState(false)")
    assert page.evaluate(USER_LISTENING) is True


def test_query_selector_returns_element_handle_or_none(page: PageStub) -> None:
    element = page.evaluate("() => document.querySelector('body')")
    assert isinstance(element, ElementState)
    assert element.dataset["theme"] == "dark"
    assert page.evaluate("() => document.querySelector('#nothing')") is None
    assert page.evaluate("() => document.querySelector('#nothing').classList.contains('x')") is None


def test_apply_theme_call_forwards_options(page: PageStub) -> None:
    page.evaluate("applyTheme('light', {announce: true, force: true})")
    assert page.evaluate("() => window.__testState.speakCalls") == ["Light theme activated."]
    assert page.query_selector("body").dataset["theme"] == "light"


def test_async_block_replays_calls_in_order(page: PageStub) -> None:
    page.evaluate("(async () => { await setMutedState(false); await setMutedState(true, {announce: true}); })()")
    assert page.evaluate("window.__testState.recognitionStartCalls") == 1
    assert page.evaluate("window.__testState.recognitionStopCalls") == 1
    assert page.evaluate("window.__testState.speakCalls") == ["Microphone muted."]


def test_comparisons_return_booleans(page: PageStub) -> None:
    assert page.evaluate("() => window.__testState.recognitionStartCalls > 0") is False
    page.dispatch_event("body", "click")
    assert page.evaluate("() => window.__testState.recognitionStartCalls > 0") is True
    assert page.evaluate("() => window.__testState.getUserMediaCalls === 1") is True


def test_unsupported_snippet_raises(page: PageStub) -> None:
    with pytest.raises(UnsupportedExpressionError):
        page.evaluate("1 + 1")


def test_missing_state_key_propagates(page: PageStub) -> None:
    with pytest.raises(MissingKeyError):
        page.evaluate("() => window.__testState.unknownCounter > 0")
    with pytest.raises(MissingKeyError):
        page.wait_for_function("() => window.__testState.unknownCounter > 0", timeout=1000)


def test_app_is_created_once_and_kept(page: PageStub) -> None:
    app = page.app
    page.goto("AI/index.html")
    page.evaluate("setMutedState(false)")
    assert page.app is app


def test_app_is_created_lazily_without_navigation() -> None:
    page = PageStub(settings=Settings())
    assert page.text_content("#mute-indicator .indicator-text") == "Tap or click anywhere to unmute"


def test_other_events_are_ignored(page: PageStub) -> None:
    page.dispatch_event("#mute-indicator", "click")
    page.dispatch_event("body", "keydown")
    assert page.app.is_muted is True


def test_length_of_a_counter_is_a_lookup_failure(page: PageStub) -> None:
    with pytest.raises(MissingKeyError):
        page.evaluate("window.__testState.recognitionStartCalls.length")


@pytest.mark.parametrize(
    "expression",
    [
        "() => window.__testState.speakCalls > 0",
        "() => window.__testState.recognitionStartCalls > null",
        "() => window.__testState.recognitionStartCalls <= 'many'",
    ],
)
def test_ordering_across_types_is_false(page: PageStub, expression: str) -> None:
    assert page.evaluate(expression) is False


def test_non_ascii_digits_are_stored_as_raw_text(page: PageStub) -> None:
    page.evaluate("window.__testState.custom = ²")
    assert page.evaluate("window.__testState.custom") == "²"
