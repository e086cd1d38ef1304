"""Editable XML document handles backed by lxml.

An :class:`XmlDocumentEditor` owns a parsed document. Editors opened from a
path write the document back when the last editor for that path closes;
editors opened from a byte stream are never written anywhere.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Callable

from lxml import etree

logger = logging.getLogger(__name__)


class XmlDocumentEditor:
    """A parsed, mutable XML document plus its release operation."""

    def __init__(
        self,
        tree: etree._ElementTree,
        path: Path | None = None,
        on_release: Callable[["XmlDocumentEditor", bool], None] | None = None,
    ) -> None:
        self._tree = tree
        self.path = path
        self._on_release = on_release
        self.closed = False

    @property
    def file(self) -> etree._ElementTree:
        if self.closed:
            raise ValueError("XML editor is closed")
        return self._tree

    @property
    def persistent(self) -> bool:
        return self.path is not None

    def close(self) -> None:
        """Release the document, writing it back if backed by a file."""
        self._release(persist=True)

    def discard(self) -> None:
        """Release the document without writing anything."""
        self._release(persist=False)

    def _release(self, persist: bool) -> None:
        if self.closed:
            return
        self.closed = True
        if self._on_release is not None:
            self._on_release(self, persist)

    def __enter__(self) -> "XmlDocumentEditor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
        else:
            self.discard()

    def __repr__(self) -> str:
        origin = self.path if self.path is not None else "<stream>"
        return f"XmlDocumentEditor({origin}, closed={self.closed})"


def _parser() -> etree.XMLParser:
    return etree.XMLParser(remove_blank_text=False, resolve_entities=False)


def write_document(tree: etree._ElementTree, path: Path, pretty_print: bool = False) -> None:
    """Serialize *tree* to *path* as UTF-8 with an XML declaration."""
    if pretty_print:
        etree.indent(tree, space="    ")
    tree.write(str(path), encoding="utf-8", xml_declaration=True)


class XmlEditorFactory:
    """Opens XML editors for files under a resource tree root.

    ``factory["res/values/strings.xml"]`` opens a file relative to the root;
    ``factory[stream]`` parses a byte stream into a read-only editor. Editors
    for the same file share one tree and a reference count; the file is
    written once the last of them closes.
    """

    def __init__(self, root: Path, pretty_print: bool = False) -> None:
        self.root = Path(root)
        self.pretty_print = pretty_print
        self._open: dict[Path, tuple[etree._ElementTree, int]] = {}

    def __getitem__(self, key: str | Path | BinaryIO) -> XmlDocumentEditor:
        if isinstance(key, (str, Path)):
            return self.open_path(key)
        return self.open_stream(key)

    def open_stream(self, stream: BinaryIO) -> XmlDocumentEditor:
        tree = etree.parse(stream, _parser())
        return XmlDocumentEditor(tree)

    def open_path(self, relative_path: str | Path) -> XmlDocumentEditor:
        path = (self.root / relative_path).resolve()
        if path in self._open:
            tree, count = self._open[path]
            self._open[path] = (tree, count + 1)
        else:
            tree = etree.parse(str(path), _parser())
            self._open[path] = (tree, 1)
        return XmlDocumentEditor(tree, path=path, on_release=self._release)

    def is_open(self, relative_path: str | Path) -> bool:
        return (self.root / relative_path).resolve() in self._open

    def _release(self, editor: XmlDocumentEditor, persist: bool) -> None:
        assert editor.path is not None
        tree, count = self._open[editor.path]
        if count > 1:
            self._open[editor.path] = (tree, count - 1)
            return

        del self._open[editor.path]
        if persist:
            write_document(tree, editor.path, pretty_print=self.pretty_print)
            logger.debug("Wrote %s", editor.path)
        else:
            logger.debug("Discarded changes to %s", editor.path)
