"""Bundled resource discovery and overlay onto the target ``res/`` tree."""

from resmerge.resources.context import ResourceContext
from resmerge.resources.copy import copy_resource, copy_resources, legacy_copy
from resmerge.resources.embedded import ASSET_ROOT_ENV, EmbeddedResourceSource, get_asset_root
from resmerge.resources.groups import ResourceGroup

__all__ = [
    "ASSET_ROOT_ENV",
    "EmbeddedResourceSource",
    "ResourceContext",
    "ResourceGroup",
    "copy_resource",
    "copy_resources",
    "get_asset_root",
    "legacy_copy",
]
