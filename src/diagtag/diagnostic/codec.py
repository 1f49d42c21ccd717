# topmark:header:start
#
#   project      : DiagTag
#   file         : codec.py
#   file_relpath : src/diagtag/diagnostic/codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tagged message encoding and recognition.

A tagged message has the shape::

    <ProjectTag><[Kind]><space-or-none><body>

where ``<ProjectTag>`` is ``[<package-name>]`` or, for bugs, ``[<package-name>@<version>]``
and ``[Kind]`` may be colorized. The space is omitted when the body already starts
with ``[``.

The tag is the only trace of the kind once the message is built: recognizing a
message later (possibly in another process, after the error was serialized) is plain
string-prefix matching against the two project tags.
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

from diagtag.constants import TRACEBACK_HEADER

if TYPE_CHECKING:
    from diagtag.config.project import ProjectInfo
    from diagtag.diagnostic.kinds import DiagnosticKind
    from diagtag.diagnostic.types import Colorer

# Header of a JavaScript-style stack ("Error: <message>") as found in serialized transports:
_GENERIC_STACK_HEADER: str = "Error: "


@dataclass(frozen=True, slots=True)
class DecodedMessage:
    """A recognized tagged message with its project tag stripped.

    Attributes:
        message (str): The message without the project tag. For versioned (bug) messages
            the clean stack follows on the next lines.
        has_version (bool): True if the message carried the versioned project tag, i.e.
            the presenter should show the library version alongside it.
    """

    message: str
    has_version: bool


def encode_message(
    kind: DiagnosticKind,
    message: str,
    *,
    project: ProjectInfo,
    colorer: Colorer,
) -> str:
    """Prefix ``message`` with the project tag and the (colorized) kind label.

    Args:
        kind (DiagnosticKind): The diagnostic kind.
        message (str): The raw message body.
        project (ProjectInfo): The project whose tag prefixes the message.
        colorer (Colorer): Decorates the ``[Kind]`` label.

    Returns:
        str: The tagged message.
    """
    label: str = colorer(kind.label, kind.color.value)
    project_tag: str = project.tag_with_version if kind.versioned else project.tag
    whitespace: str = "" if message.startswith("[") else " "
    return f"{project_tag}{label}{whitespace}{message}"


def decode_error(err: object, *, project: ProjectInfo) -> DecodedMessage | None:
    """Recognize a tagged message carried by an arbitrary caught value.

    The versioned tag is tested first: it is checked by exact prefix, so a versioned
    message is never reported as plain-tagged.

    Args:
        err (object): Any caught value: an exception, an object with a ``message``
            attribute, or a mapping with a ``"message"`` key (e.g. a deserialized error).
        project (ProjectInfo): The project whose tags are recognized.

    Returns:
        DecodedMessage | None: The stripped message, or None if ``err`` does not carry a
            string message tagged by ``project``.
    """
    message: str | None = _get_message(err)
    if message is None:
        return None

    if message.startswith(project.tag_with_version):
        body: str = message[len(project.tag_with_version) :]
        stack: str | None = _get_stack(err)
        if stack is not None:
            body = f"{body}\n{_remove_stack_header(stack)}"
        return DecodedMessage(message=body, has_version=True)

    if message.startswith(project.tag):
        return DecodedMessage(message=message[len(project.tag) :], has_version=False)

    return None


def _get_field(err: object, name: str) -> object:
    if isinstance(err, Mapping):
        return cast("Mapping[object, object]", err).get(name)
    return getattr(err, name, None)


def _get_message(err: object) -> str | None:
    message: object = _get_field(err, "message")
    if message is None and isinstance(err, BaseException) and err.args:
        message = err.args[0]
    return message if isinstance(message, str) else None


def _get_stack(err: object) -> str | None:
    """Return the stack recorded on ``err``, rendered as text, or None if it has none."""
    stack: object = _get_field(err, "stack")
    if stack is None or stack == "":
        if isinstance(err, BaseException) and err.__traceback__ is not None:
            return "".join(traceback.format_tb(err.__traceback__))
        return None
    return stack if isinstance(stack, str) else str(stack)


def _remove_stack_header(stack: str) -> str:
    first_line, _, rest = stack.partition("\n")
    if first_line == TRACEBACK_HEADER or first_line.startswith(_GENERIC_STACK_HEADER):
        return rest
    return stack
