"""resmerge - overlay bundled resources and XML fragments onto a decoded app tree."""

from resmerge.errors import (
    CopyUnsupportedError,
    ElementNotFoundError,
    MergePlanError,
    ResMergeError,
    ResourceNotFoundError,
)
from resmerge.resources import EmbeddedResourceSource, ResourceContext, ResourceGroup, copy_resources
from resmerge.xmlmerge import MergeRelease, XmlDocumentEditor, copy_xml_node, merge_xml_resource

__version__ = "0.1.0"

__all__ = [
    "CopyUnsupportedError",
    "ElementNotFoundError",
    "EmbeddedResourceSource",
    "MergePlanError",
    "MergeRelease",
    "ResMergeError",
    "ResourceContext",
    "ResourceGroup",
    "ResourceNotFoundError",
    "XmlDocumentEditor",
    "__version__",
    "copy_resources",
    "copy_xml_node",
    "merge_xml_resource",
]
