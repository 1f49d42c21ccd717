# topmark:header:start
#
#   project      : DiagTag
#   file         : project.py
#   file_relpath : src/diagtag/config/project.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Project identity used to tag diagnostics.

A [`ProjectInfo`][diagtag.config.project.ProjectInfo] names the library on whose behalf
diagnostics are reported. It provides the two project tags that prefix every tagged
message:

    - plain tag: ``[<package-name>]``
    - versioned tag: ``[<package-name>@<version>]``

Recognition of tagged messages relies on plain string-prefix matching, so the package
name and version must not contain tag delimiters (``[``, ``]``, ``@``) or whitespace.
This is validated at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib.metadata import metadata
from typing import TYPE_CHECKING

from diagtag.constants import (
    DIAGTAG_PACKAGE_NAME,
    DIAGTAG_PROJECT_NAME,
    DIAGTAG_REPOSITORY,
    DIAGTAG_VERSION,
    TAG_DELIMITERS,
)

if TYPE_CHECKING:
    from email.message import Message

# Project-URL labels tried in order when looking up the repository of a distribution:
_REPOSITORY_URL_LABELS: tuple[str, ...] = ("repository", "source", "source code", "homepage")


def _check_tag_component(field_name: str, value: str) -> None:
    if not value:
        raise ValueError(f"ProjectInfo.{field_name} must not be empty")
    bad: set[str] = {c for c in value if c in TAG_DELIMITERS or c.isspace()}
    if bad:
        raise ValueError(
            f"ProjectInfo.{field_name}={value!r} contains characters that break tag "
            f"recognition: {''.join(sorted(bad))!r}"
        )


@dataclass(frozen=True, slots=True)
class ProjectInfo:
    """Identity of the library reporting diagnostics.

    Attributes:
        package_name (str): Distribution / import name shown in the project tag.
        project_name (str): Human-facing project name used in bug messages.
        version (str): Version shown in the versioned project tag.
        repository (str): Repository URL; bug reports point at ``<repository>/issues/new``.
    """

    package_name: str
    project_name: str
    version: str
    repository: str

    def __post_init__(self) -> None:
        _check_tag_component("package_name", self.package_name)
        _check_tag_component("version", self.version)

    @property
    def tag(self) -> str:
        """Return the plain project tag, e.g. ``[diagtag]``."""
        return f"[{self.package_name}]"

    @property
    def tag_with_version(self) -> str:
        """Return the versioned project tag, e.g. ``[diagtag@0.3.0]``."""
        return f"[{self.package_name}@{self.version}]"

    @property
    def issues_url(self) -> str:
        """Return the URL where users file bug reports."""
        return f"{self.repository.rstrip('/')}/issues/new"

    @classmethod
    def default(cls) -> ProjectInfo:
        """Return the project info describing DiagTag itself."""
        return cls(
            package_name=DIAGTAG_PACKAGE_NAME,
            project_name=DIAGTAG_PROJECT_NAME,
            version=DIAGTAG_VERSION,
            repository=DIAGTAG_REPOSITORY,
        )

    @classmethod
    def from_distribution(
        cls,
        distribution_name: str,
        *,
        project_name: str | None = None,
        repository: str | None = None,
    ) -> ProjectInfo:
        """Build project info from the metadata of an installed distribution.

        The repository URL is taken from the first matching ``Project-URL`` entry
        (``Repository``, ``Source``, ``Source Code``, ``Homepage``), falling back to the
        ``Home-page`` field.

        Args:
            distribution_name (str): Name of the installed distribution.
            project_name (str | None): Display name; defaults to the distribution name.
            repository (str | None): Explicit repository URL overriding the metadata.

        Returns:
            ProjectInfo: The project info for the distribution.

        Raises:
            ValueError: If no repository URL is given or declared in the metadata,
                or if the name or version cannot be used in a project tag.
        """
        # Raises importlib.metadata.PackageNotFoundError for unknown distributions
        meta: Message = metadata(distribution_name)  # pyright: ignore[reportAssignmentType]
        name: str = meta["Name"]
        repo: str | None = repository or _find_repository_url(meta)
        if not repo:
            raise ValueError(f"No repository URL declared for distribution {name!r}")
        return cls(
            package_name=name,
            project_name=project_name or name,
            version=meta["Version"],
            repository=repo,
        )


def _find_repository_url(meta: Message) -> str | None:
    urls: dict[str, str] = {}
    for entry in meta.get_all("Project-URL") or []:
        label, _, url = str(entry).partition(",")
        urls.setdefault(label.strip().lower(), url.strip())
    for label in _REPOSITORY_URL_LABELS:
        if urls.get(label):
            return urls[label]
    home_page: str | None = meta.get("Home-page")
    return home_page or None
