# topmark:header:start
#
#   project      : DiagTag
#   file         : __init__.py
#   file_relpath : src/diagtag/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for DiagTag: project identity and internal logging."""

from __future__ import annotations

from diagtag.config.project import ProjectInfo

__all__ = [
    "ProjectInfo",
]
