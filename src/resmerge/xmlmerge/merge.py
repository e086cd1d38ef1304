"""Splice the children of one XML element into another document.

:func:`copy_xml_node` finds the first element with a given tag in a source
and a target document, appends deep copies of every child node of the
source element to the target element, and hands back a :class:`MergeRelease`
that closes both documents together.
"""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING

from lxml import etree

from resmerge.errors import ElementNotFoundError
from resmerge.xmlmerge.editor import XmlDocumentEditor

if TYPE_CHECKING:
    from resmerge.resources.context import ResourceContext
    from resmerge.resources.embedded import EmbeddedResourceSource

logger = logging.getLogger(__name__)


class MergeRelease:
    """Closes the source and target editors of a merge as one unit.

    ``close()`` closes the source, then the target. Calling it again does
    nothing. Also usable as a context manager.
    """

    def __init__(self, source: XmlDocumentEditor, target: XmlDocumentEditor) -> None:
        self._source = source
        self._target = target
        self.released = False

    def close(self) -> None:
        if self.released:
            return
        self.released = True
        try:
            self._source.close()
        finally:
            self._target.close()

    def __enter__(self) -> "MergeRelease":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def find_first_element(tree: etree._ElementTree, tag: str) -> etree._Element | None:
    """Return the first element named *tag* in document order, root included."""
    return next(tree.getroot().iter(tag), None)


def _append_text(parent: etree._Element, text: str) -> None:
    if len(parent):
        last = parent[-1]
        last.tail = (last.tail or "") + text
    else:
        parent.text = (parent.text or "") + text


def append_child_copies(source_element: etree._Element, target_element: etree._Element) -> int:
    """Append deep copies of all child nodes of *source_element* to *target_element*.

    Text, elements, comments and processing instructions are copied in
    document order. Returns the number of nodes appended (text runs included).
    """
    appended = 0
    if source_element.text:
        _append_text(target_element, source_element.text)
        appended += 1
    for child in source_element:
        # deepcopy carries the child's tail text along with it
        target_element.append(copy.deepcopy(child))
        appended += 1 + bool(child.tail)
    return appended


def copy_xml_node(tag: str, source: XmlDocumentEditor, target: XmlDocumentEditor) -> MergeRelease:
    """Copy the children of the first *tag* element of *source* into *target*.

    Both elements are located before anything is modified, so a missing tag
    leaves both documents untouched.

    Raises:
        ElementNotFoundError: *tag* is absent from the source or the target.
    """
    source_element = find_first_element(source.file, tag)
    if source_element is None:
        raise ElementNotFoundError(tag, "source")

    target_element = find_first_element(target.file, tag)
    if target_element is None:
        raise ElementNotFoundError(tag, "target")

    appended = append_child_copies(source_element, target_element)
    logger.debug("Appended %d node(s) into <%s> of %r", appended, tag, target)
    return MergeRelease(source, target)


def merge_xml_resource(
    context: ResourceContext,
    source: EmbeddedResourceSource,
    resource_directory: str,
    target_resource: str,
    tag: str,
) -> None:
    """Merge the bundled ``resource_directory/target_resource`` into ``res/target_resource``.

    On success both documents are released and the target is written. On
    failure both editors are discarded and the error propagates.
    """
    with source.open(f"{resource_directory}/{target_resource}") as stream:
        source_editor = context.xml_editor[stream]
    try:
        target_editor = context.xml_editor[f"res/{target_resource}"]
    except Exception:
        source_editor.discard()
        raise

    try:
        release = copy_xml_node(tag, source_editor, target_editor)
    except Exception:
        source_editor.discard()
        target_editor.discard()
        raise

    release.close()
    logger.debug("Merged <%s> from %s/%s", tag, resource_directory, target_resource)
