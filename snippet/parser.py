"""Ordered, closed-grammar parser for page evaluation snippets.

Each rule either returns a snippet variant or ``None``; the first rule that
matches wins. Text no rule accepts is rejected outright.
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Union

from infra.errors import UnsupportedExpressionError
from snippet.grammar import (
    COMPARISON_OPERATORS,
    ApplyThemeCall,
    AssignState,
    AsyncBlock,
    Comparison,
    Lambda,
    QuerySelector,
    ReadState,
    SetMutedStateCall,
    Snippet,
)
from snippet.literals import parse_literal, split_call_arguments, strip_quotes

_PATH = r"[\w$]+(?:\s*\.\s*[\w$]+)*"
_OPERATORS = "|".join(re.escape(op) for op in COMPARISON_OPERATORS)

_ASSIGN_RE = re.compile(
    rf"^window\.__testState\.(?P<path>{_PATH})\s*=(?!=)\s*(?P<value>\S.*?)\s*;?$",
    re.DOTALL,
)
_APPLY_THEME_RE = re.compile(r"^applyTheme\((?P<args>.*)\)\s*;?$", re.DOTALL)
_SET_MUTED_RE = re.compile(r"^setMutedState\((?P<args>.*)\)\s*;?$", re.DOTALL)
_ASYNC_RE = re.compile(r"^\(\s*async\s*\(\s*\)\s*=>", re.DOTALL)
_AWAITED_CALL_RE = re.compile(r"\b(?P<name>applyTheme|setMutedState)\((?P<args>[^)]*)\)")
_LAMBDA_RE = re.compile(r"^(?P<open>\(\s*)?(?:async\s*)?\(\s*\)\s*=>\s*(?P<body>.*)$", re.DOTALL)
_IIFE_TAIL_RE = re.compile(r"\)\s*(?:\(\s*\))?\s*;?\s*$")
_READ_RE = re.compile(
    rf"^window\.__testState\.(?P<path>{_PATH})\s*(?:(?P<op>{_OPERATORS})\s*(?P<literal>\S.*?))?\s*;?$",
    re.DOTALL,
)
_QUERY_RE = re.compile(
    r"^document\.querySelector\(\s*(?P<q>['\"])(?P<selector>.+?)(?P=q)\s*\)"
    r"(?:\.classList\.contains\(\s*(?P<cq>['\"])(?P<class_name>.+?)(?P=cq)\s*\))?\s*;?$",
    re.DOTALL,
)

AppCall = Union[ApplyThemeCall, SetMutedStateCall]


def _apply_theme_call(args: str) -> ApplyThemeCall:
    first, options = split_call_arguments(args)
    return ApplyThemeCall(
        theme=strip_quotes(first),
        announce=options.get("announce", False),
        force=options.get("force", False),
    )


def _set_muted_state_call(args: str) -> SetMutedStateCall:
    first, options = split_call_arguments(args)
    return SetMutedStateCall(
        muted=strip_quotes(first).lower() == "true",
        announce=options.get("announce", False),
    )


_CALL_BUILDERS: dict[str, Callable[[str], AppCall]] = {
    "applyTheme": _apply_theme_call,
    "setMutedState": _set_muted_state_call,
}


def _normalize_path(path: str) -> str:
    return ".".join(part.strip() for part in path.split("."))


def _match_assignment(text: str) -> Optional[AssignState]:
    match = _ASSIGN_RE.match(text)
    if not match:
        return None
    return AssignState(path=_normalize_path(match["path"]), value=parse_literal(match["value"]))


def _match_apply_theme(text: str) -> Optional[ApplyThemeCall]:
    match = _APPLY_THEME_RE.match(text)
    return _apply_theme_call(match["args"]) if match else None


def _match_set_muted_state(text: str) -> Optional[SetMutedStateCall]:
    match = _SET_MUTED_RE.match(text)
    return _set_muted_state_call(match["args"]) if match else None


def _match_async_block(text: str) -> Optional[AsyncBlock]:
    if not _ASYNC_RE.match(text):
        return None
    calls = tuple(
        _CALL_BUILDERS[call["name"]](call["args"])
        for call in _AWAITED_CALL_RE.finditer(text)
        if call["args"].strip()
    )
    return AsyncBlock(calls=calls) if calls else None


def _match_state_read(text: str) -> Optional[ReadState]:
    match = _READ_RE.match(text)
    if not match:
        return None
    comparison = None
    if match["op"]:
        comparison = Comparison(operator=match["op"], literal=parse_literal(match["literal"]))
    return ReadState(path=_normalize_path(match["path"]), comparison=comparison)


def _match_query_selector(text: str) -> Optional[QuerySelector]:
    match = _QUERY_RE.match(text)
    if not match:
        return None
    return QuerySelector(selector=match["selector"], class_name=match["class_name"])


def _lambda_body(text: str) -> Optional[str]:
    match = _LAMBDA_RE.match(text)
    if not match:
        return None
    body = match["body"].strip()
    if match["open"]:
        body, closed = _IIFE_TAIL_RE.subn("", body, count=1)
        if not closed:
            return None
        body = body.strip()
    if body.startswith("{") and body.endswith("}"):
        body = body[1:-1].strip()
        if body.startswith("return "):
            body = body[len("return ") :].strip()
    return body.rstrip(";").strip()


def _match_lambda(text: str) -> Optional[Lambda]:
    body = _lambda_body(text)
    if body is None:
        return None
    parsed = _match_state_read(body) or _match_query_selector(body)
    if parsed is None:
        raise UnsupportedExpressionError(f"Unsupported lambda body: {body}")
    return Lambda(body=parsed)


_RULES: tuple[Callable[[str], Optional[Snippet]], ...] = (
    _match_assignment,
    _match_apply_theme,
    _match_set_muted_state,
    _match_async_block,
    _match_lambda,
    _match_state_read,
)


def parse_snippet(expression: str) -> Snippet:
    """Parse an evaluation snippet into its tagged variant."""
    text = expression.strip()
    for rule in _RULES:
        try:
            snippet = rule(text)
        except ValueError as exc:
            raise UnsupportedExpressionError(f"Malformed expression: {text}: {exc}") from exc
        if snippet is not None:
            return snippet
    raise UnsupportedExpressionError(f"Unsupported expression: {text}")


def parse_predicate(expression: str) -> Union[Lambda, ReadState]:
    """Parse a snippet usable as a polling predicate: an arrow function or a bare read."""
    snippet = parse_snippet(expression)
    if not isinstance(snippet, (Lambda, ReadState)):
        raise UnsupportedExpressionError(f"Not a predicate expression: {expression.strip()}")
    return snippet
