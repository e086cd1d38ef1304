"""Overlay bundled resource files onto the target ``res/`` tree.

Each resource is copied with :func:`shutil.copyfile` when the bundled file
lives on the filesystem. Bundles imported from an archive expose no
filesystem path; for those the copy falls back to :func:`legacy_copy`,
which streams the bytes by hand. Both paths overwrite existing files and
never create missing destination directories.
"""

from __future__ import annotations

import logging
import shutil
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import BinaryIO

from resmerge.errors import CopyUnsupportedError
from resmerge.resources.context import ResourceContext
from resmerge.resources.embedded import EmbeddedResourceSource
from resmerge.resources.groups import ResourceGroup

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def _bulk_copy(resource: Traversable, destination: Path) -> None:
    try:
        fspath = resource.__fspath__
    except AttributeError as exc:
        raise CopyUnsupportedError(f"{resource!r} has no filesystem path") from exc
    shutil.copyfile(fspath(), destination)


def legacy_copy(stream: BinaryIO, destination: Path) -> None:
    """Copy *stream* to *destination* with a manual read/write loop."""
    with open(destination, "wb") as handle:
        while True:
            chunk = stream.read(CHUNK_SIZE)
            if not chunk:
                break
            handle.write(chunk)


def copy_resource(source: EmbeddedResourceSource, resource_path: str, destination: Path) -> None:
    """Copy one bundled resource to *destination*, replacing any existing file."""
    resource = source.locate(resource_path)
    try:
        _bulk_copy(resource, destination)
    except CopyUnsupportedError:
        logger.debug("Bulk copy unavailable for %s, using stream copy", resource_path)
        with resource.open("rb") as stream:
            legacy_copy(stream, destination)


def copy_resources(
    context: ResourceContext,
    source: EmbeddedResourceSource,
    source_resource_directory: str,
    *resource_groups: ResourceGroup,
) -> list[Path]:
    """Copy every resource of every group into ``res/<group dir>/``.

    Groups and resources are processed in the order given; a later resource
    with the same destination overwrites an earlier one.

    Args:
        context: Target resource tree.
        source: Bundled asset store.
        source_resource_directory: Directory under *source* holding the groups.
        resource_groups: Groups to copy.

    Returns:
        Destination paths written, in copy order.

    Raises:
        ResourceNotFoundError: A bundled resource does not exist.
        OSError: Reading or writing a file failed.
    """
    written: list[Path] = []
    target_resource_directory = context.resource_directory

    for resource_group in resource_groups:
        for resource_file in resource_group.resource_files():
            destination = target_resource_directory / resource_file
            copy_resource(source, f"{source_resource_directory}/{resource_file}", destination)
            logger.debug("Copied %s/%s -> %s", source_resource_directory, resource_file, destination)
            written.append(destination)

    return written

