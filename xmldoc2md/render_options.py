"""Rendering options and their validation."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from xmldoc2md.links import LinkStyle
from xmldoc2md.member_selector import VisibilityPolicy

DEFAULT_BACK_BUTTON_LABEL = "Back"
DEFAULT_BACK_BUTTON_TARGET = "./index.md"
DEFAULT_CODE_LANGUAGE = "csharp"


class ConfigurationError(ValueError):
    """Raised before rendering when options contradict each other."""


@dataclass(frozen=True)
class RenderOptions:
    """Settings shared by every page of one rendering run."""

    include_private_members: bool = False
    exclude_internals: bool = False
    only_internal_members: bool = False
    has_back_button: bool = False
    back_button_label: str = DEFAULT_BACK_BUTTON_LABEL
    back_button_target: str = DEFAULT_BACK_BUTTON_TARGET
    examples_directory: Path | None = None
    link_style: LinkStyle = field(default_factory=LinkStyle)
    code_language: str = DEFAULT_CODE_LANGUAGE

    @property
    def policy(self) -> VisibilityPolicy:
        if not self.include_private_members:
            return VisibilityPolicy.PUBLIC_ONLY
        if self.exclude_internals:
            return VisibilityPolicy.INCLUDE_PRIVATE_EXCEPT_INTERNAL
        if self.only_internal_members:
            return VisibilityPolicy.INTERNAL_ONLY
        return VisibilityPolicy.INCLUDE_PRIVATE

    def validate(self) -> "RenderOptions":
        """Fail fast on contradictory settings; returns self for chaining."""
        if self.exclude_internals and self.only_internal_members:
            msg = "exclude_internals and only_internal cannot both be set"
            raise ConfigurationError(msg)
        if (
            self.exclude_internals or self.only_internal_members
        ) and not self.include_private_members:
            msg = "exclude_internals and only_internal require include_private"
            raise ConfigurationError(msg)
        if self.has_back_button and not (
            self.back_button_label.strip() and self.back_button_target.strip()
        ):
            msg = "A back button needs both a label and a target"
            raise ConfigurationError(msg)
        if not self.code_language.strip():
            msg = "code_language must not be empty"
            raise ConfigurationError(msg)
        return self

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "RenderOptions":
        """Build options from a merged configuration dictionary."""
        members = config.get("members") or {}
        navigation = config.get("navigation") or {}
        links = config.get("links") or {}

        try:
            style = LinkStyle.for_platform(links.get("platform"))
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        style = style.combined(
            LinkStyle(
                no_extension=bool(links.get("no_extension")),
                no_prefix=bool(links.get("no_prefix")),
            )
        )

        examples = config.get("examples_directory")
        return cls(
            include_private_members=bool(members.get("include_private")),
            exclude_internals=bool(members.get("exclude_internals")),
            only_internal_members=bool(members.get("only_internal")),
            has_back_button=bool(navigation.get("back_button")),
            back_button_label=_text(
                navigation, "back_button_label", DEFAULT_BACK_BUTTON_LABEL
            ),
            back_button_target=_text(
                navigation, "back_button_target", DEFAULT_BACK_BUTTON_TARGET
            ),
            examples_directory=Path(examples) if examples else None,
            link_style=style,
            code_language=_text(config, "code_language", DEFAULT_CODE_LANGUAGE),
        )


def _text(section: dict[str, Any], key: str, default: str) -> str:
    """A string setting; an explicit null or empty value stays empty."""
    if key not in section:
        return default
    value = section[key]
    return "" if value is None else str(value)
