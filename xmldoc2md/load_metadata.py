"""Logic for loading module metadata YAML files.

A metadata file describes one compiled module: its name and version, the
modules it references and every type it declares, with their members. Type
and parameter references use the documentation-id spelling
(``System.Collections.Generic.List{System.Int32}``).
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from xmldoc2md.descriptors import (
    MemberDescriptor,
    MemberKind,
    Parameter,
    TypeDescriptor,
    Visibility,
)

logger = logging.getLogger(__name__)

YAML_MIME_PREFIX = "### YamlMime:"


class MetadataError(ValueError):
    """Raised when a metadata file is missing required information."""


@dataclass(frozen=True)
class ModuleReference:
    name: str
    version: str | None = None


@dataclass(frozen=True)
class ModuleMetadata:
    """Everything read from one metadata file."""

    module: str
    version: str | None
    references: tuple[ModuleReference, ...]
    types: tuple[TypeDescriptor, ...]
    path: Path | None = None


def strip_yaml_mime_header(text: str) -> str:
    """Remove a leading ``### YamlMime:`` header line."""
    lines = text.splitlines()
    if lines and lines[0].startswith(YAML_MIME_PREFIX):
        return "\n".join(lines[1:]).lstrip("\n")
    return text


def load_metadata(path: Path) -> ModuleMetadata:
    """Load and validate a module metadata YAML file."""
    raw = strip_yaml_mime_header(Path(path).read_text(encoding="utf-8"))
    metadata = parse_metadata(yaml.safe_load(raw), path=Path(path))
    logger.info(
        "Loaded %d types of module %s from %s",
        len(metadata.types),
        metadata.module,
        path,
    )
    return metadata


def parse_metadata(doc: Any, path: Path | None = None) -> ModuleMetadata:
    """Build descriptors from an already parsed YAML document."""
    if not isinstance(doc, dict):
        msg = f"Metadata must be a mapping: {path or '<string>'}"
        raise MetadataError(msg)
    module = _as_text(doc.get("module"))
    if not module:
        msg = f"Metadata has no module name: {path or '<string>'}"
        raise MetadataError(msg)

    references = tuple(
        _parse_reference(r) for r in _as_list(doc.get("references"), "references")
    )
    types = tuple(
        _parse_type(t, module) for t in _as_list(doc.get("types"), "types")
    )
    return ModuleMetadata(
        module=module,
        version=_as_text(doc.get("version")) or None,
        references=references,
        types=types,
        path=path,
    )


def _parse_reference(raw: Any) -> ModuleReference:
    if isinstance(raw, str):
        return ModuleReference(name=raw)
    if not isinstance(raw, dict) or not _as_text(raw.get("name")):
        msg = f"Module reference needs a name: {raw!r}"
        raise MetadataError(msg)
    return ModuleReference(
        name=_as_text(raw["name"]),
        version=_as_text(raw.get("version")) or None,
    )


def _parse_type(raw: Any, module: str) -> TypeDescriptor:
    if not isinstance(raw, dict):
        msg = f"Type entry must be a mapping: {raw!r}"
        raise MetadataError(msg)
    full_name = _as_text(raw.get("fullName"))
    if not full_name:
        msg = f"Type entry has no fullName: {raw!r}"
        raise MetadataError(msg)

    namespace = raw.get("namespace")
    if namespace is None:
        namespace = full_name.rpartition(".")[0]
    obsolete, obsolete_message = _parse_obsolete(raw.get("obsolete"))
    members = tuple(
        _parse_member(m, full_name)
        for m in _as_list(raw.get("members"), f"{full_name}.members")
    )
    return TypeDescriptor(
        full_name=full_name,
        namespace=_as_text(namespace),
        kind=_as_text(raw.get("kind")).lower() or "class",
        module=_as_text(raw.get("module")) or module,
        signature=_as_text(raw.get("signature")),
        base_types=_as_names(raw.get("baseTypes")),
        implements=_as_names(raw.get("implements")),
        generic_parameters=_as_names(raw.get("genericParameters")),
        is_flags=bool(raw.get("flags")),
        obsolete=obsolete,
        obsolete_message=obsolete_message,
        members=members,
    )


def _parse_member(raw: Any, declaring_type: str) -> MemberDescriptor:
    if not isinstance(raw, dict):
        msg = f"Member entry of {declaring_type} must be a mapping: {raw!r}"
        raise MetadataError(msg)
    try:
        kind = MemberKind(_as_text(raw.get("kind")).lower())
        visibility = Visibility.parse(raw.get("visibility"))
    except ValueError as e:
        msg = f"Invalid member of {declaring_type}: {e}"
        raise MetadataError(msg) from e

    is_static = bool(raw.get("static"))
    name = _as_text(raw.get("name"))
    if not name and kind is MemberKind.CONSTRUCTOR:
        name = ".cctor" if is_static else ".ctor"
    if not name:
        msg = f"Member of {declaring_type} has no name: {raw!r}"
        raise MetadataError(msg)

    parameters = []
    for position, p in enumerate(_as_list(raw.get("parameters"), name)):
        if not isinstance(p, dict) or not _as_text(p.get("type")):
            msg = f"Parameter of {declaring_type}.{name} needs a type: {p!r}"
            raise MetadataError(msg)
        parameters.append(
            Parameter(
                name=_as_text(p.get("name")) or f"arg{position}",
                type=_as_text(p["type"]),
                position=position,
            )
        )

    obsolete, obsolete_message = _parse_obsolete(raw.get("obsolete"))
    return MemberDescriptor(
        kind=kind,
        name=name,
        declaring_type=declaring_type,
        signature=_as_text(raw.get("signature")),
        visibility=visibility,
        generic_parameters=_as_names(raw.get("genericParameters")),
        parameters=tuple(parameters),
        return_type=_as_text(raw.get("returnType")) or None,
        is_static=is_static,
        special_name=bool(raw.get("specialName")),
        value=raw.get("value"),
        obsolete=obsolete,
        obsolete_message=obsolete_message,
    )


def _parse_obsolete(value: Any) -> tuple[bool, str | None]:
    """``obsolete: true`` or ``obsolete: "Use Other instead."``."""
    if isinstance(value, str):
        return True, value.strip() or None
    return bool(value), None


def _as_text(v: object) -> str:
    if v is None:
        return ""
    return str(v).strip()


def _as_list(v: Any, what: str) -> list[Any]:
    if v is None:
        return []
    if not isinstance(v, list):
        msg = f"Expected a list for {what}, got {type(v).__name__}"
        raise MetadataError(msg)
    return v


def _as_names(v: Any) -> tuple[str, ...]:
    if v is None:
        return ()
    if isinstance(v, str):
        return (v.strip(),)
    return tuple(_as_text(x) for x in v if _as_text(x))
