# topmark:header:start
#
#   project      : DiagTag
#   file         : test_project.py
#   file_relpath : tests/config/test_project.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `ProjectInfo`: project tags, validation and metadata lookup."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError

import pytest

from diagtag.config.project import ProjectInfo
from diagtag.constants import DIAGTAG_REPOSITORY, DIAGTAG_VERSION
from tests.conftest import ACME, parametrize


def test_project_tags() -> None:
    """The plain and versioned tags should wrap the package name (and version)."""
    assert ACME.tag == "[acme]"
    assert ACME.tag_with_version == "[acme@1.2.3]"
    assert ACME.tag_with_version.startswith(ACME.tag[:-1])


def test_issues_url_ignores_trailing_slash() -> None:
    """The issues URL should not contain a double slash."""
    info = ProjectInfo("acme", "Acme", "1.0.0", "https://example.org/acme/")

    assert info.issues_url == "https://example.org/acme/issues/new"


@parametrize(
    ("package_name", "version"),
    [
        pytest.param("ac]me", "1.0.0", id="closing-bracket-in-name"),
        pytest.param("[acme", "1.0.0", id="opening-bracket-in-name"),
        pytest.param("acme@next", "1.0.0", id="at-in-name"),
        pytest.param("ac me", "1.0.0", id="space-in-name"),
        pytest.param("acme", "1.0]", id="bracket-in-version"),
        pytest.param("acme", "", id="empty-version"),
        pytest.param("", "1.0.0", id="empty-name"),
    ],
)
def test_tag_delimiters_are_rejected(package_name: str, version: str) -> None:
    """Names or versions that would break prefix matching should be refused."""
    with pytest.raises(ValueError, match="ProjectInfo"):
        ProjectInfo(package_name, "Acme", version, "https://example.org/acme")


def test_default_describes_diagtag() -> None:
    """The default project info should describe DiagTag itself."""
    info: ProjectInfo = ProjectInfo.default()

    assert info.package_name == "diagtag"
    assert info.project_name == "DiagTag"
    assert info.version == DIAGTAG_VERSION
    assert info.repository == DIAGTAG_REPOSITORY


def test_from_distribution_reads_installed_metadata() -> None:
    """Metadata of the installed distribution should provide name, version and repository."""
    info: ProjectInfo = ProjectInfo.from_distribution("diagtag", project_name="DiagTag")

    assert info.package_name == "diagtag"
    assert info.project_name == "DiagTag"
    assert info.version == DIAGTAG_VERSION
    assert info.repository == DIAGTAG_REPOSITORY


def test_from_distribution_explicit_repository_wins() -> None:
    """An explicit repository URL should override the metadata."""
    info: ProjectInfo = ProjectInfo.from_distribution(
        "diagtag", repository="https://example.org/fork"
    )

    assert info.repository == "https://example.org/fork"
    assert info.project_name == "diagtag"


def test_from_distribution_unknown_package() -> None:
    """An unknown distribution should raise `PackageNotFoundError`."""
    with pytest.raises(PackageNotFoundError):
        ProjectInfo.from_distribution("diagtag-this-distribution-does-not-exist")
