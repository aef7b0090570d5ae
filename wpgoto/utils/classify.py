"""Classify positional tokens into a project and a location."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from wpgoto.utils.errors import ContextError, InvocationError, UsageError

MAX_TOKENS = 2

_LABEL = r"[a-zA-Z0-9](-*[a-zA-Z0-9])*"
_HOSTNAME_RE = re.compile(rf"^({_LABEL})(\.({_LABEL}))*$")
_LENGTH_RE = re.compile(r"^.{1,253}$")
_LABEL_LENGTH_RE = re.compile(r"^[^.]{1,63}(\.[^.]{1,63})*$")

_NOT_IN_PROJECT = (
    "You need to be in a project to use the shorthand `goto` macro. "
    "Please specify a project."
)


@dataclass(frozen=True)
class ClassifiedRequest:
    project: str | None = None
    location: str | None = None


@dataclass(frozen=True)
class RunContext:
    """Everything the classifier needs from the running process."""

    tokens: tuple[str, ...] | None
    invoker_path: str
    cwd: str
    projects_root: str | None = None

    @property
    def root(self) -> str:
        """Directory holding every project (configured, else the invoker's dir)."""
        return projects_root_for(self.invoker_path, self.projects_root)

    @classmethod
    def from_process(
        cls,
        tokens: Sequence[str],
        projects_root: str | None = None,
    ) -> "RunContext":
        """Capture argv[0] and the cwd.

        Raises InvocationError without argv or when the cwd no longer exists.
        """
        argv = getattr(sys, "argv", None)
        if not argv or not argv[0]:
            raise InvocationError("The argument vector is not set.")
        try:
            cwd = os.getcwd()
        except OSError as err:
            raise InvocationError(f"The current directory is unavailable: {err}") from err
        return cls(
            tokens=tuple(tokens),
            invoker_path=os.path.normpath(os.path.join(cwd, argv[0])),
            cwd=cwd,
            projects_root=projects_root,
        )


def projects_root_for(invoker_path: str, projects_root: str | None = None) -> str:
    if projects_root:
        return projects_root.rstrip("/") or "/"
    return os.path.dirname(invoker_path)


def is_hostname(token: str) -> bool:
    """Return True if *token* looks like a project host name (needs a dot)."""
    return bool(
        _HOSTNAME_RE.match(token)
        and _LENGTH_RE.match(token)
        and _LABEL_LENGTH_RE.match(token)
        and "." in token
    )


def infer_project(cwd: str, root: str) -> str:
    """Return the project directory *cwd* sits in, below *root*."""
    prefix = root.rstrip("/") + "/"
    if not cwd.startswith(prefix):
        raise ContextError(_NOT_IN_PROJECT)
    project = cwd[len(prefix):].split("/", 1)[0]
    if not project:
        raise ContextError(_NOT_IN_PROJECT)
    return project


def classify(
    tokens: Optional[Sequence[str]],
    invoker_path: str,
    cwd: str,
    projects_root: str | None = None,
) -> ClassifiedRequest:
    """Split *tokens* into project and location roles.

    A token matching the hostname grammar is the project, anything else is
    the location. If two tokens land in the same role the later one wins.
    A location without a project infers the project from *cwd*, which must
    sit below the projects root (*projects_root*, else the directory of
    *invoker_path*).
    """
    if tokens is None:
        raise InvocationError("The argument vector is not set.")
    if len(tokens) > MAX_TOKENS:
        raise UsageError("This command only accepts up to two parameters.")

    project: str | None = None
    location: str | None = None
    for token in tokens:
        if is_hostname(token):
            project = token
        else:
            location = token

    if project is None and location is not None:
        project = infer_project(cwd, projects_root_for(invoker_path, projects_root))

    if project is None and location is None:
        raise UsageError("Insufficient parameters.")

    return ClassifiedRequest(project=project, location=location)


def classify_context(context: RunContext) -> ClassifiedRequest:
    return classify(
        context.tokens,
        context.invoker_path,
        context.cwd,
        projects_root=context.projects_root,
    )
