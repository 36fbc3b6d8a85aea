"""Placeholder substitution for translated templates.

Templates use the brace syntax of `str.format`, restricted to what a
translator can safely write:

- ``{name}`` is replaced by the keyword argument ``name``
- ``{0}``, ``{1}`` ... are replaced by positional arguments
- ``{name:spec}`` renders the value with ``format(value, spec)``
- ``{{`` and ``}}`` produce literal braces

Attribute and item access (``{user.name}``, ``{items[0]}``) and conversions
(``{name!r}``) are deliberately not supported; they are syntax errors.

Arguments that the template does not reference are ignored.
"""
from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Any, List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from i18nx.errors import InvalidFormatSpecError, MissingArgumentError, TemplateSyntaxError


class _State(Enum):
    LITERAL = "literal"
    IN_PLACEHOLDER = "in_placeholder"
    ESCAPE_PENDING_OPEN = "escape_pending_open"
    ESCAPE_PENDING_CLOSE = "escape_pending_close"


class Field(NamedTuple):
    name: str
    spec: str
    position: int

    @property
    def is_positional(self) -> bool:
        return self.name.isdigit()


Part = Union[str, Field]


def _make_field(text: str, start: int) -> Field:
    """Build a Field from the raw text between the braces.

    `start` is the offset of the opening brace in the template.
    """
    name, _, spec = text.partition(":")
    if not name:
        raise TemplateSyntaxError(start, "empty placeholder name")
    if name.isascii() and name.isdigit():
        return Field(name, spec, start)
    if not name.isidentifier():
        for i, ch in enumerate(name):
            if not (ch == "_" or ch.isalnum()) or (i == 0 and ch.isdigit()):
                raise TemplateSyntaxError(start + 1 + i, f"invalid character {ch!r} in placeholder name")
        raise TemplateSyntaxError(start + 1, f"invalid placeholder name {name!r}")
    return Field(name, spec, start)


@lru_cache(maxsize=1024)
def parse(template: str) -> Tuple[Part, ...]:
    """Split a template into literal chunks and Field entries.

    Raises TemplateSyntaxError for unmatched braces and bad placeholder names.
    """
    parts: List[Part] = []
    buf: List[str] = []
    field: List[str] = []
    state = _State.LITERAL
    open_pos = close_pos = 0

    for pos, ch in enumerate(template):
        if state is _State.ESCAPE_PENDING_OPEN:
            if ch == "{":
                buf.append("{")
                state = _State.LITERAL
                continue
            if buf:
                parts.append("".join(buf))
                buf = []
            field = []
            state = _State.IN_PLACEHOLDER
            # fall through: this character is the first one of the placeholder

        if state is _State.LITERAL:
            if ch == "{":
                open_pos = pos
                state = _State.ESCAPE_PENDING_OPEN
            elif ch == "}":
                close_pos = pos
                state = _State.ESCAPE_PENDING_CLOSE
            else:
                buf.append(ch)
        elif state is _State.ESCAPE_PENDING_CLOSE:
            if ch != "}":
                raise TemplateSyntaxError(close_pos, "single '}' encountered in template")
            buf.append("}")
            state = _State.LITERAL
        elif state is _State.IN_PLACEHOLDER:
            if ch == "}":
                parts.append(_make_field("".join(field), open_pos))
                state = _State.LITERAL
            elif ch == "{":
                raise TemplateSyntaxError(pos, "unexpected '{' inside placeholder")
            else:
                field.append(ch)

    if state is _State.ESCAPE_PENDING_OPEN:
        raise TemplateSyntaxError(open_pos, "single '{' encountered in template")
    if state is _State.IN_PLACEHOLDER:
        raise TemplateSyntaxError(open_pos, "unterminated placeholder")
    if state is _State.ESCAPE_PENDING_CLOSE:
        raise TemplateSyntaxError(close_pos, "single '}' encountered in template")

    if buf:
        parts.append("".join(buf))
    return tuple(parts)


def placeholders(template: str) -> List[str]:
    """Return placeholder names in template order, repeats included."""
    return [part.name for part in parse(template) if isinstance(part, Field)]


def _render(field: Field, value: Any) -> str:
    try:
        return format(value, field.spec)
    except (TypeError, ValueError) as exc:
        raise InvalidFormatSpecError(field.name, field.spec, str(exc)) from exc


def format_template(
    template: str,
    values: Optional[Mapping[str, Any]] = None,
    positional: Sequence[Any] = (),
) -> str:
    """Substitute arguments into `template`.

    Args:
        template: the (possibly translated) template string
        values: named arguments, matched by placeholder name
        positional: arguments addressed by ``{0}``, ``{1}`` ...

    Raises:
        TemplateSyntaxError: malformed placeholder syntax
        MissingArgumentError: a placeholder has no matching argument
        InvalidFormatSpecError: a format spec does not apply to its value
    """
    values = values or {}
    out: List[str] = []
    for part in parse(template):
        if isinstance(part, str):
            out.append(part)
            continue
        if part.is_positional:
            # length check first: int() refuses very long digit strings
            digits = part.name.lstrip("0") or "0"
            if len(digits) > len(str(len(positional))) or int(digits) >= len(positional):
                raise MissingArgumentError(part.name)
            value = positional[int(digits)]
        else:
            if part.name not in values:
                raise MissingArgumentError(part.name)
            value = values[part.name]
        out.append(_render(part, value))
    return "".join(out)
