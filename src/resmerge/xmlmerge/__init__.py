"""XML document editing and node-level merging."""

from resmerge.xmlmerge.editor import XmlDocumentEditor, XmlEditorFactory, write_document
from resmerge.xmlmerge.merge import (
    MergeRelease,
    append_child_copies,
    copy_xml_node,
    find_first_element,
    merge_xml_resource,
)

__all__ = [
    "MergeRelease",
    "XmlDocumentEditor",
    "XmlEditorFactory",
    "append_child_copies",
    "copy_xml_node",
    "find_first_element",
    "merge_xml_resource",
    "write_document",
]
