"""Resource groups: named bundles of files sharing a resource sub-directory."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceGroup:
    """Resource names mapped to the directory they live in.

    ``resource_directory_name`` is both the sub-directory under the bundled
    source directory and the sub-directory under ``res/`` in the target.
    """

    resource_directory_name: str
    resources: tuple[str, ...]

    def __init__(self, resource_directory_name: str, *resources: str) -> None:
        object.__setattr__(self, "resource_directory_name", resource_directory_name)
        object.__setattr__(self, "resources", tuple(resources))

    def resource_files(self) -> list[str]:
        """Return ``<directory>/<name>`` for every resource, in order."""
        return [f"{self.resource_directory_name}/{name}" for name in self.resources]
