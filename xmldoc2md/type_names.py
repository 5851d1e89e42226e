"""Parsing and formatting of type references written in documentation-id form.

Documentation ids spell constructed generic types with braces and generic
parameters with backticks, e.g. ``System.Collections.Generic.List{System.Int32}``,
`` `0 `` for the first type parameter of the declaring type and ``` ``0 ``` for
the first type parameter of a method.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

ARITY_RE = re.compile(r"`+\d+")
VOID_TYPES = {"System.Void", "void", ""}


@dataclass(frozen=True)
class TypeRef:
    """A parsed type reference."""

    name: str
    args: tuple[TypeRef, ...] = ()
    suffix: str = ""  # array ranks, pointer and by-ref markers, in source order
    type_parameter: int | None = None
    method_parameter: int | None = None

    @property
    def is_generic_parameter(self) -> bool:
        return self.type_parameter is not None or self.method_parameter is not None

    @property
    def definition(self) -> str:
        """Locator of the generic definition, e.g. ``List`1`` for ``List{Int32}``."""
        if self.args:
            return f"{self.name}`{len(self.args)}"
        return self.name


def parse_type_reference(text: str) -> TypeRef:
    """Parse a documentation-id type reference.

    Malformed input never raises; whatever could not be parsed stays in the
    name so it can still be shown as text.
    """
    ref, _ = _parse(text.strip(), 0)
    return ref


def _parse(text: str, pos: int) -> tuple[TypeRef, int]:
    start = pos
    type_parameter = None
    method_parameter = None

    if text.startswith("``", pos):
        digits = _digits(text, pos + 2)
        method_parameter = int(digits) if digits else None
        pos += 2 + len(digits)
    elif text.startswith("`", pos):
        digits = _digits(text, pos + 1)
        type_parameter = int(digits) if digits else None
        pos += 1 + len(digits)
    else:
        while pos < len(text) and text[pos] not in "{},[]@*":
            pos += 1
    name = text[start:pos]

    args: list[TypeRef] = []
    if pos < len(text) and text[pos] == "{":
        pos += 1
        while pos < len(text):
            arg, pos = _parse(text, pos)
            args.append(arg)
            if pos < len(text) and text[pos] == ",":
                pos += 1
                continue
            if pos < len(text) and text[pos] == "}":
                pos += 1
            break

    suffix_start = pos
    while pos < len(text):
        if text[pos] == "[":
            end = text.find("]", pos)
            if end == -1:
                break
            pos = end + 1
        elif text[pos] in "@*":
            pos += 1
        else:
            break

    return (
        TypeRef(
            name=name,
            args=tuple(args),
            suffix=text[suffix_start:pos],
            type_parameter=type_parameter,
            method_parameter=method_parameter,
        ),
        pos,
    )


def _digits(text: str, pos: int) -> str:
    end = pos
    while end < len(text) and text[end].isdigit():
        end += 1
    return text[pos:end]


def strip_arity(name: str) -> str:
    """Remove generic-arity markers: ``Widget`1`` -> ``Widget``."""
    return ARITY_RE.sub("", name)


def simple_name(full_name: str) -> str:
    """Return the unqualified name of a type without its arity marker."""
    return strip_arity(full_name.rsplit(".", 1)[-1])


def is_void(type_name: str | None) -> bool:
    return type_name is None or type_name.strip() in VOID_TYPES


def display_name(
    text: str,
    type_parameters: Sequence[str] = (),
    method_parameters: Sequence[str] = (),
) -> str:
    """Format a type reference for humans: ``List{System.Int32}`` -> ``List<Int32>``."""
    return format_type_ref(
        parse_type_reference(text), type_parameters, method_parameters
    )


def format_type_ref(
    ref: TypeRef,
    type_parameters: Sequence[str] = (),
    method_parameters: Sequence[str] = (),
) -> str:
    if ref.method_parameter is not None:
        idx = ref.method_parameter
        base = (
            method_parameters[idx]
            if idx < len(method_parameters)
            else f"``{idx}"
        )
    elif ref.type_parameter is not None:
        idx = ref.type_parameter
        base = type_parameters[idx] if idx < len(type_parameters) else f"`{idx}"
    else:
        base = simple_name(ref.name)

    if ref.args:
        inner = ", ".join(
            format_type_ref(a, type_parameters, method_parameters) for a in ref.args
        )
        base = f"{base}<{inner}>"
    return base + ref.suffix.replace("@", "&")
