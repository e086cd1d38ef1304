"""Exception types raised by resmerge.

Filesystem failures during a copy or a save are not wrapped: the underlying
``OSError`` propagates to the caller unchanged.
"""

from __future__ import annotations


class ResMergeError(RuntimeError):
    """Base class for resmerge errors."""


class ResourceNotFoundError(ResMergeError, FileNotFoundError):
    """Raised when an expected embedded resource does not exist."""

    def __init__(self, resource_path: str) -> None:
        self.resource_path = resource_path
        super().__init__(f"Embedded resource not found: {resource_path}")


class CopyUnsupportedError(ResMergeError):
    """Raised by the bulk copy when the resource has no filesystem path.

    Handled inside :mod:`resmerge.resources.copy`; never reaches the host.
    """


class ElementNotFoundError(ResMergeError, LookupError):
    """Raised when the merge tag is missing from one of the documents."""

    def __init__(self, tag: str, side: str) -> None:
        self.tag = tag
        self.side = side
        super().__init__(f"No <{tag}> element in {side} document")


class MergePlanError(ResMergeError):
    """Raised when a merge plan file is malformed."""
