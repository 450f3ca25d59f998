"""Recover the written body of a callable for exception reports."""

from __future__ import annotations

import ast
import inspect
import re
import textwrap
from types import CodeType
from typing import Any, Callable

from shouldpack.capture.context import normalize_expression

# Receiver prefixes that only add noise to a rendered body.
MEMBER_PATTERN = re.compile(r"\bself\.")


def describe_callable(function: Callable[..., Any], label: str | None = None) -> str:
    """Cleaned source text of ``function``'s body.

    An explicit ``label`` wins. Lambdas and single-expression functions are
    read back from source; anything without retrievable source falls back to
    its qualified name, or ``""``.
    """
    if label is not None:
        return normalize_expression(label)

    body = _source_body(function)
    if body is None:
        return normalize_expression(getattr(function, "__qualname__", None))
    return clean_function_body(body)


def clean_function_body(body: str) -> str:
    return MEMBER_PATTERN.sub("", body).strip()


def _source_body(function: Callable[..., Any]) -> str | None:
    try:
        lines, first_line = inspect.getsourcelines(function)
    except (OSError, TypeError):
        return None

    if getattr(function, "__name__", None) == "<lambda>":
        return _lambda_body("".join(lines), first_line, getattr(function, "__code__", None))
    return _def_body(textwrap.dedent("".join(lines)).strip())


def _lambda_body(source: str, first_line: int, code: CodeType | None) -> str | None:
    candidates = _lambda_candidates(source)
    if not candidates:
        return None
    if code is None:
        _start, fragment, node = candidates[0]
        return ast.get_source_segment(fragment, node.body)

    positions = _code_positions(code)
    # Innermost first, so a lambda returning a lambda is not mistaken for it.
    for start, fragment, node in reversed(candidates):
        if _body_position(source, first_line, start, node) in positions:
            return ast.get_source_segment(fragment, node.body)

    # Without instruction positions, match on the names the body refers to.
    names = _code_names(code)
    for _start, fragment, node in candidates:
        if _node_names(node) == names:
            return ast.get_source_segment(fragment, node.body)

    _start, fragment, node = candidates[0]
    return ast.get_source_segment(fragment, node.body)


def _lambda_candidates(source: str) -> list[tuple[int, str, ast.Lambda]]:
    # getsource returns whole lines; shrink from the right until the text
    # starting at each "lambda" parses as a lambda on its own.
    candidates = []
    start = source.find("lambda")
    while start != -1:
        candidate = source[start:]
        for end in range(len(candidate), 0, -1):
            fragment = candidate[:end]
            try:
                tree = ast.parse(fragment, mode="eval")
            except SyntaxError:
                continue
            if isinstance(tree.body, ast.Lambda):
                candidates.append((start, fragment, tree.body))
                break
        start = source.find("lambda", start + 1)
    return candidates


def _body_position(source: str, first_line: int, start: int, node: ast.Lambda) -> tuple[int, int]:
    body = node.body
    line = first_line + source.count("\n", 0, start) + body.lineno - 1
    if body.lineno > 1:
        return line, body.col_offset
    line_start = source.rfind("\n", 0, start) + 1
    return line, len(source[line_start:start].encode("utf-8")) + body.col_offset


def _code_positions(code: CodeType) -> set[tuple[int, int]]:
    positions = getattr(code, "co_positions", None)
    if positions is None:
        return set()
    return {
        (line, column)
        for line, _end_line, column, _end_column in positions()
        if line is not None and column is not None
    }


def _code_names(code: CodeType) -> set[str]:
    names = set(code.co_names) | set(code.co_varnames)
    names |= set(code.co_freevars) | set(code.co_cellvars)
    for constant in code.co_consts:
        if isinstance(constant, CodeType):
            names |= _code_names(constant)
    return names


def _node_names(node: ast.AST) -> set[str]:
    names = set()
    for child in ast.walk(node):
        if isinstance(child, ast.Name):
            names.add(child.id)
        elif isinstance(child, ast.Attribute):
            names.add(child.attr)
        elif isinstance(child, ast.arg):
            names.add(child.arg)
    return names


def _def_body(source: str) -> str | None:
    try:
        tree = ast.parse(source)
    except SyntaxError:
        return None
    if not tree.body or not isinstance(tree.body[0], (ast.FunctionDef, ast.AsyncFunctionDef)):
        return None

    statements = [
        statement
        for statement in tree.body[0].body
        if not _is_docstring(statement)
    ]
    if len(statements) == 1 and isinstance(statements[0], (ast.Return, ast.Expr)):
        value = statements[0].value
        if value is not None:
            return ast.get_source_segment(source, value)

    segments = [ast.get_source_segment(source, statement) for statement in statements]
    return "; ".join(segment for segment in segments if segment)


def _is_docstring(statement: ast.stmt) -> bool:
    return (
        isinstance(statement, ast.Expr)
        and isinstance(statement.value, ast.Constant)
        and isinstance(statement.value.value, str)
    )
