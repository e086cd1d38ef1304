"""The on-disk resource tree that merges write into."""

from __future__ import annotations

from pathlib import Path

from resmerge.xmlmerge.editor import XmlEditorFactory


class ResourceContext:
    """Writable view of a decoded application tree.

    ``context["res"]`` resolves a path relative to the tree root, and
    :attr:`xml_editor` opens XML documents for editing. The tree is assumed
    to be exclusively owned by the current process while merges run.
    """

    def __init__(self, root: Path, pretty_print: bool = False) -> None:
        self.root = Path(root)
        self.xml_editor = XmlEditorFactory(self.root, pretty_print=pretty_print)

    def __getitem__(self, path: str) -> Path:
        return self.root / path

    @property
    def resource_directory(self) -> Path:
        return self["res"]

    def resolve(self, relative_path: str) -> Path:
        """Resolve *relative_path* beneath the ``res`` directory."""
        return self.resource_directory / relative_path

    def __repr__(self) -> str:
        return f"ResourceContext({self.root})"
