import pytest

from snippet.literals import parse_literal, parse_options, split_call_arguments


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("[]", []),
        ("[ ]", []),
        ("true", True),
        ("FALSE", False),
        ("null", None),
        ("0", 0),
        ("-3", -3),
        ("'light'", "light"),
        ('"dark"', "dark"),
        ("someIdentifier", "someIdentifier"),
    ],
)
def test_parse_literal(raw: str, expected: object) -> None:
    assert parse_literal(raw) == expected
    assert type(parse_literal(raw)) is type(expected)


def test_parse_options_reads_flags() -> None:
    assert parse_options("{announce: true, force: false}") == {"announce": True, "force": False}
    assert parse_options("{ 'announce': TRUE }") == {"announce": True}
    assert parse_options("{}") == {}


def test_parse_options_rejects_bare_keys() -> None:
    with pytest.raises(ValueError):
        parse_options("{announce}")


def test_split_call_arguments() -> None:
    first, options = split_call_arguments("'light', {announce: true}")
    assert first == "'light'"
    assert options == {"announce": True}
    assert split_call_arguments("false") == ("false", {})
