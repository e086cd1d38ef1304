"""Read-only access to bundled resource files.

An :class:`EmbeddedResourceSource` is rooted at an ``importlib.resources``
Traversable: the data directory of an installed package, a plain directory,
or a ``zipfile.Path`` when the package is imported from an archive.
Resources are addressed with ``/``-separated relative paths.
"""

from __future__ import annotations

import importlib.resources
import os
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import BinaryIO

from resmerge.errors import ResourceNotFoundError

ASSET_ROOT_ENV = "RESMERGE_ASSET_ROOT"


def get_asset_root(package: str | None = None) -> Traversable:
    """Return the root of the bundled assets.

    Resolution order:
    1. RESMERGE_ASSET_ROOT environment variable (CI/testing)
    2. importlib.resources.files(package) (installed package)

    Raises:
        FileNotFoundError: If the override does not exist or no package was given.
    """
    if env_root := os.environ.get(ASSET_ROOT_ENV):
        root = Path(env_root)
        if root.is_dir():
            return root
        raise FileNotFoundError(f"{ASSET_ROOT_ENV} path does not exist: {env_root}")

    if package is None:
        raise FileNotFoundError(
            f"Cannot locate bundled assets. Set {ASSET_ROOT_ENV} or pass a package name."
        )
    return importlib.resources.files(package)


class EmbeddedResourceSource:
    """Path-addressable, read-only store of bundled files."""

    def __init__(self, root: Traversable) -> None:
        self.root = root

    @classmethod
    def from_package(cls, package: str | None = None) -> "EmbeddedResourceSource":
        return cls(get_asset_root(package))

    def locate(self, path: str) -> Traversable:
        """Return the Traversable for *path*, or raise if it is not a file."""
        resource = self.root
        for part in path.split("/"):
            if part:
                resource = resource.joinpath(part)
        if not resource.is_file():
            raise ResourceNotFoundError(path)
        return resource

    def open(self, path: str) -> BinaryIO:
        return self.locate(path).open("rb")

    def __repr__(self) -> str:
        return f"EmbeddedResourceSource({self.root!r})"
