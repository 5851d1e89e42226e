"""Page names, anchors and URLs for link targets."""

from dataclasses import dataclass

from xmldoc2md.descriptors import MemberDescriptor

PLATFORM_DOCS_ROOT = "https://docs.microsoft.com/en-us/dotnet/api/"


@dataclass(frozen=True)
class LinkStyle:
    """How links between generated pages are spelled for the target platform."""

    no_extension: bool = False  # GitHub Pages and GitLab wikis resolve bare names
    no_prefix: bool = False  # GitLab wikis reject "./"

    @classmethod
    def for_platform(cls, platform: str | None) -> "LinkStyle":
        p = (platform or "default").lower()
        if p == "github-pages":
            return cls(no_extension=True)
        if p == "gitlab-wiki":
            return cls(no_extension=True, no_prefix=True)
        if p == "default":
            return cls()
        msg = f"Unknown link platform: {platform}"
        raise ValueError(msg)

    def combined(self, other: "LinkStyle") -> "LinkStyle":
        """Flags set by either style."""
        return LinkStyle(
            no_extension=self.no_extension or other.no_extension,
            no_prefix=self.no_prefix or other.no_prefix,
        )


def page_name(full_name: str) -> str:
    """File stem of a type page: ``Lib.Widget`1`` -> ``lib.widget-1``."""
    return full_name.lower().replace("`", "-")


def page_url(full_name: str, style: LinkStyle) -> str:
    prefix = "" if style.no_prefix else "./"
    extension = "" if style.no_extension else ".md"
    return f"{prefix}{page_name(full_name)}{extension}"


def member_anchor(member: MemberDescriptor) -> str:
    """In-page anchor id of a member section, e.g. ``methods-render``."""
    return f"{member.kind.title.lower()}-{member.name.lower()}"


def platform_url(full_name: str) -> str:
    """Reference documentation URL of a platform type or member."""
    return PLATFORM_DOCS_ROOT + full_name.lower().replace("`", "-")
