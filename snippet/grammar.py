"""Tagged snippet variants produced by the parser."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Union


def _strict_equal(left: Any, right: Any) -> bool:
    return type(left) is type(right) and left == right


def _strict_not_equal(left: Any, right: Any) -> bool:
    return not _strict_equal(left, right)


# Longest operators first so ">=" is not read as ">".
COMPARISON_OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "===": _strict_equal,
    "!==": _strict_not_equal,
    "==": operator.eq,
    "!=": operator.ne,
    ">=": operator.ge,
    "<=": operator.le,
    ">": operator.gt,
    "<": operator.lt,
}


@dataclass(frozen=True)
class Comparison:
    operator: str
    literal: Any

    def apply(self, value: Any) -> bool:
        try:
            return COMPARISON_OPERATORS[self.operator](value, self.literal)
        except TypeError:
            # relational operators across unrelated types are false, as in JS
            return False


@dataclass(frozen=True)
class AssignState:
    """``window.__testState.<path> = <literal>``"""

    path: str
    value: Any


@dataclass(frozen=True)
class ApplyThemeCall:
    theme: str
    announce: bool = False
    force: bool = False


@dataclass(frozen=True)
class SetMutedStateCall:
    muted: bool
    announce: bool = False


@dataclass(frozen=True)
class AsyncBlock:
    """Awaited app calls replayed synchronously in source order."""

    calls: tuple[Union[ApplyThemeCall, SetMutedStateCall], ...]


@dataclass(frozen=True)
class ReadState:
    path: str
    comparison: Comparison | None = None


@dataclass(frozen=True)
class QuerySelector:
    selector: str
    class_name: str | None = None


@dataclass(frozen=True)
class Lambda:
    """Zero-argument arrow function whose body is a read or a DOM query."""

    body: Union[ReadState, QuerySelector]


Snippet = Union[AssignState, ApplyThemeCall, SetMutedStateCall, AsyncBlock, Lambda, ReadState]
