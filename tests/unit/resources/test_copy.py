"""Tests for resmerge.resources.copy: overlaying resource groups.

Covers the filesystem copy, the stream fallback for archive-backed bundles,
overwrite semantics and failure propagation.
"""

from __future__ import annotations

import zipfile
from pathlib import Path
from unittest.mock import patch

import pytest

from resmerge.errors import CopyUnsupportedError, ResourceNotFoundError
from resmerge.resources.context import ResourceContext
from resmerge.resources.copy import _bulk_copy, copy_resources, legacy_copy
from resmerge.resources.embedded import EmbeddedResourceSource
from resmerge.resources.groups import ResourceGroup


# ---------------------------------------------------------------------------
# ResourceGroup
# ---------------------------------------------------------------------------


class TestResourceGroup:
    def test_resource_files_in_order(self) -> None:
        group = ResourceGroup("drawable", "b.png", "a.png")
        assert group.resource_files() == ["drawable/b.png", "drawable/a.png"]

    def test_immutable(self) -> None:
        group = ResourceGroup("drawable", "a.png")
        with pytest.raises(AttributeError):
            group.resource_directory_name = "layout"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert ResourceGroup("drawable", "a.png") == ResourceGroup("drawable", "a.png")
        assert ResourceGroup("drawable", "a.png") != ResourceGroup("layout", "a.png")


# ---------------------------------------------------------------------------
# copy_resources()
# ---------------------------------------------------------------------------


class TestCopyResources:
    def test_bytes_match_source(
        self, context: ResourceContext, source: EmbeddedResourceSource, asset_root: Path
    ) -> None:
        group = ResourceGroup("drawable", "icon.png", "banner.png")
        written = copy_resources(context, source, "branding", group)

        res = context.resource_directory
        assert written == [res / "drawable" / "icon.png", res / "drawable" / "banner.png"]
        for name in group.resources:
            expected = (asset_root / "branding" / "drawable" / name).read_bytes()
            assert (res / "drawable" / name).read_bytes() == expected

    def test_overwrites_existing(self, context: ResourceContext, source: EmbeddedResourceSource) -> None:
        existing = context.resource_directory / "drawable" / "icon.png"
        existing.write_bytes(b"old contents that are longer than the new file" * 100)

        copy_resources(context, source, "branding", ResourceGroup("drawable", "icon.png"))

        assert existing.read_bytes() == b"\x89PNG\r\n\x1a\n\x00icon"

    def test_copy_twice_is_idempotent(self, context: ResourceContext, source: EmbeddedResourceSource) -> None:
        group = ResourceGroup("drawable", "icon.png", "banner.png")
        copy_resources(context, source, "branding", group)
        first = {p.name: p.read_bytes() for p in (context.resource_directory / "drawable").iterdir()}

        copy_resources(context, source, "branding", group)
        second = {p.name: p.read_bytes() for p in (context.resource_directory / "drawable").iterdir()}

        assert first == second

    def test_last_write_wins(
        self, context: ResourceContext, source: EmbeddedResourceSource, asset_root: Path
    ) -> None:
        other = asset_root / "other" / "drawable"
        other.mkdir(parents=True)
        (other / "icon.png").write_bytes(b"second")

        copy_resources(context, source, "branding", ResourceGroup("drawable", "icon.png"))
        copy_resources(context, source, "other", ResourceGroup("drawable", "icon.png"))

        assert (context.resource_directory / "drawable" / "icon.png").read_bytes() == b"second"

    def test_multiple_groups(
        self, context: ResourceContext, source: EmbeddedResourceSource, asset_root: Path
    ) -> None:
        layout = asset_root / "branding" / "layout"
        layout.mkdir()
        (layout / "card.xml").write_text("<LinearLayout/>")
        (context.resource_directory / "layout").mkdir()

        written = copy_resources(
            context,
            source,
            "branding",
            ResourceGroup("drawable", "icon.png"),
            ResourceGroup("layout", "card.xml"),
        )

        assert [p.name for p in written] == ["icon.png", "card.xml"]
        assert (context.resource_directory / "layout" / "card.xml").read_text() == "<LinearLayout/>"

    def test_missing_resource_is_fatal(self, context: ResourceContext, source: EmbeddedResourceSource) -> None:
        with pytest.raises(ResourceNotFoundError):
            copy_resources(context, source, "branding", ResourceGroup("drawable", "icon.png", "gone.png"))

        # resources before the missing one were already copied
        assert (context.resource_directory / "drawable" / "icon.png").exists()

    def test_missing_destination_directory_not_created(
        self, context: ResourceContext, source: EmbeddedResourceSource, asset_root: Path
    ) -> None:
        mipmap = asset_root / "branding" / "mipmap"
        mipmap.mkdir()
        (mipmap / "launcher.png").write_bytes(b"x")

        with patch("resmerge.resources.copy.legacy_copy") as fallback:
            with pytest.raises(FileNotFoundError):
                copy_resources(context, source, "branding", ResourceGroup("mipmap", "launcher.png"))

        fallback.assert_not_called()
        assert not (context.resource_directory / "mipmap").exists()

    def test_zip_bundle_uses_stream_copy(self, context: ResourceContext, tmp_path: Path) -> None:
        archive = tmp_path / "bundle.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr("branding/drawable/icon.png", b"zipped-icon")

        source = EmbeddedResourceSource(zipfile.Path(archive))
        copy_resources(context, source, "branding", ResourceGroup("drawable", "icon.png"))

        assert (context.resource_directory / "drawable" / "icon.png").read_bytes() == b"zipped-icon"


# ---------------------------------------------------------------------------
# Bulk copy and stream fallback
# ---------------------------------------------------------------------------


class TestBulkCopy:
    def test_rejects_non_filesystem_resource(self, tmp_path: Path) -> None:
        archive = tmp_path / "bundle.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr("a.bin", b"a")

        with pytest.raises(CopyUnsupportedError):
            _bulk_copy(zipfile.Path(archive, "a.bin"), tmp_path / "out.bin")
        assert not (tmp_path / "out.bin").exists()

    def test_copies_filesystem_resource(self, tmp_path: Path) -> None:
        src = tmp_path / "in.bin"
        src.write_bytes(b"payload")
        _bulk_copy(src, tmp_path / "out.bin")
        assert (tmp_path / "out.bin").read_bytes() == b"payload"


class TestLegacyCopy:
    def test_truncates_existing(self, tmp_path: Path) -> None:
        src = tmp_path / "in.bin"
        src.write_bytes(b"short")
        dest = tmp_path / "out.bin"
        dest.write_bytes(b"a much longer previous payload")

        with src.open("rb") as stream:
            legacy_copy(stream, dest)

        assert dest.read_bytes() == b"short"

    def test_large_stream(self, tmp_path: Path) -> None:
        payload = bytes(range(256)) * 1024
        src = tmp_path / "in.bin"
        src.write_bytes(payload)
        dest = tmp_path / "out.bin"

        with src.open("rb") as stream:
            legacy_copy(stream, dest)

        assert dest.read_bytes() == payload

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        src = tmp_path / "in.bin"
        src.write_bytes(b"x")
        with src.open("rb") as stream, pytest.raises(FileNotFoundError):
            legacy_copy(stream, tmp_path / "missing" / "out.bin")
