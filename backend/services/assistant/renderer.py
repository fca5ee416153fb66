"""Minimal Mustache-style template renderer.

Grammar:
    {{path}}              variable; dotted paths walk nested mappings
    {{.}}                 the current scalar item inside a list section
    {{#path}}...{{/path}} section

Section semantics:
    list      body once per item; mapping items push a scope, scalars bind "."
    mapping   non-empty mappings push a scope
    other     body rendered once when truthy
Falsy values (None, False, 0, "", empty list, empty mapping) render nothing.

A section tag alone on its line consumes the whole line, newline included.
Templates are parsed once into a node tuple and cached.
"""

import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, NamedTuple, Union

_TAG_RE = re.compile(r"\{\{\s*([#/]?)\s*(\.|[A-Za-z_][\w.]*)\s*\}\}")
_STANDALONE_RE = re.compile(r"^[ \t]*\{\{\s*[#/]\s*[A-Za-z_][\w.]*\s*\}\}[ \t]*$")


class TemplateSyntaxError(ValueError):
    """Unclosed, mismatched or stray section tag."""


class Token(NamedTuple):
    kind: str  # text | var | open | close
    value: str
    line: int


class Text(NamedTuple):
    value: str


class Variable(NamedTuple):
    path: str


class Section(NamedTuple):
    path: str
    children: tuple


Node = Union[Text, Variable, Section]

_TAG_KINDS = {"": "var", "#": "open", "/": "close"}


def tokenize(source: str) -> list[Token]:
    tokens: list[Token] = []
    for lineno, line in enumerate(source.splitlines(keepends=True), start=1):
        if _STANDALONE_RE.match(line.rstrip("\r\n")):
            match = _TAG_RE.search(line)
            tokens.append(Token(_TAG_KINDS[match.group(1)], match.group(2), lineno))
            continue

        pos = 0
        for match in _TAG_RE.finditer(line):
            if match.start() > pos:
                tokens.append(Token("text", line[pos:match.start()], lineno))
            tokens.append(Token(_TAG_KINDS[match.group(1)], match.group(2), lineno))
            pos = match.end()
        if pos < len(line):
            tokens.append(Token("text", line[pos:], lineno))
    return tokens


def _parse(tokens: list[Token], pos: int, closing: Token | None) -> tuple[tuple[Node, ...], int]:
    nodes: list[Node] = []
    while pos < len(tokens):
        token = tokens[pos]
        pos += 1
        if token.kind == "text":
            nodes.append(Text(token.value))
        elif token.kind == "var":
            nodes.append(Variable(token.value))
        elif token.kind == "open":
            children, pos = _parse(tokens, pos, token)
            nodes.append(Section(token.value, children))
        else:
            if closing is None:
                raise TemplateSyntaxError(f"Unexpected {{{{/{token.value}}}}} on line {token.line}")
            if token.value != closing.value:
                raise TemplateSyntaxError(
                    f"{{{{/{token.value}}}}} on line {token.line} does not close "
                    f"{{{{#{closing.value}}}}} from line {closing.line}"
                )
            return tuple(nodes), pos

    if closing is not None:
        raise TemplateSyntaxError(f"Unclosed {{{{#{closing.value}}}}} from line {closing.line}")
    return tuple(nodes), pos


@lru_cache(maxsize=128)
def compile_template(source: str) -> tuple[Node, ...]:
    """Parse a template into its node tree."""
    nodes, _ = _parse(tokenize(source), 0, None)
    return nodes


def _get(value: Any, key: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(key)
    return None


def lookup(scopes: list[Mapping], path: str) -> Any:
    """Resolve ``path`` against the innermost scope defining its first segment."""
    if path == ".":
        return scopes[-1].get(".") if scopes else None

    head, *rest = path.split(".")
    for scope in reversed(scopes):
        if head in scope:
            value = scope[head]
            break
    else:
        return None

    for key in rest:
        value = _get(value, key)
        if value is None:
            return None
    return value


def _is_truthy(value: Any) -> bool:
    if isinstance(value, (list, tuple, Mapping)):
        return len(value) > 0
    return bool(value)


def stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ", ".join(stringify(item) for item in value)
    return str(value)


def _render_nodes(nodes: tuple[Node, ...], scopes: list[Mapping], out: list[str]) -> None:
    for node in nodes:
        if isinstance(node, Text):
            out.append(node.value)
        elif isinstance(node, Variable):
            out.append(stringify(lookup(scopes, node.path)))
        else:
            value = lookup(scopes, node.path)
            if not _is_truthy(value):
                continue
            if isinstance(value, (list, tuple)):
                for item in value:
                    frame = item if isinstance(item, Mapping) else {".": item}
                    scopes.append(frame)
                    _render_nodes(node.children, scopes, out)
                    scopes.pop()
            elif isinstance(value, Mapping):
                scopes.append(value)
                _render_nodes(node.children, scopes, out)
                scopes.pop()
            else:
                _render_nodes(node.children, scopes, out)


def render(source: str, data: Mapping[str, Any] | None = None) -> str:
    """Render ``source`` with ``data`` as the root scope."""
    out: list[str] = []
    _render_nodes(compile_template(source), [data or {}], out)
    return "".join(out)
