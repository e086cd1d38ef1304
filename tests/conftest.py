from __future__ import annotations

from pathlib import Path

import pytest

from resmerge.resources.context import ResourceContext
from resmerge.resources.embedded import ASSET_ROOT_ENV, EmbeddedResourceSource

STRINGS_TEMPLATE = '<resources><string name="x">hi</string></resources>'
STRINGS_TARGET = '<resources><string name="y">bye</string></resources>'


@pytest.fixture(autouse=True)
def _clear_asset_root(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ASSET_ROOT_ENV, raising=False)


@pytest.fixture()
def app_tree(tmp_path: Path) -> Path:
    """Decoded app directory with res/values and res/drawable."""
    root = tmp_path / "app"
    (root / "res" / "values").mkdir(parents=True)
    (root / "res" / "drawable").mkdir(parents=True)
    (root / "res" / "values" / "strings.xml").write_text(STRINGS_TARGET, encoding="utf-8")
    return root


@pytest.fixture()
def asset_root(tmp_path: Path) -> Path:
    """Bundled asset tree mirroring the res/ layout under two source dirs."""
    root = tmp_path / "assets"
    drawable = root / "branding" / "drawable"
    drawable.mkdir(parents=True)
    (drawable / "icon.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00icon")
    (drawable / "banner.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00banner")

    host_values = root / "host" / "values"
    host_values.mkdir(parents=True)
    (host_values / "strings.xml").write_text(STRINGS_TEMPLATE, encoding="utf-8")
    return root


@pytest.fixture()
def context(app_tree: Path) -> ResourceContext:
    return ResourceContext(app_tree)


@pytest.fixture()
def source(asset_root: Path) -> EmbeddedResourceSource:
    return EmbeddedResourceSource(asset_root)
