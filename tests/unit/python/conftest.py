"""
Shared pytest fixtures for unit tests
"""
import json
import pytest

from catalog import IconAlias, IconCatalogEntry


@pytest.fixture
def phosphor_svg():
    """Raw icon as exported by the design tool, before sanitizing"""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 256">'
        '<rect width="256" height="256" fill="none"/>'
        '<line x1="128" y1="216" x2="128" y2="40" fill="none" stroke="#000000" stroke-width="16"/>'
        '<polyline points="56 112 128 40 200 112" fill="none" stroke="#000" stroke-linecap="round"/>'
        '</svg>'
    )


@pytest.fixture
def arrow_up_entry():
    return IconCatalogEntry(name="arrow-up", pascal_name="ArrowUp")


@pytest.fixture
def aliased_entry():
    return IconCatalogEntry(
        name="file-text",
        pascal_name="FileText",
        alias=IconAlias(name="file-doc", pascal_name="FileDoc"),
    )


@pytest.fixture
def catalog_file(tmp_path):
    """Write a JSON catalog manifest and return its path"""
    def _write(entries):
        path = tmp_path / "icons.json"
        path.write_text(json.dumps(entries), encoding="utf-8")
        return path
    return _write
