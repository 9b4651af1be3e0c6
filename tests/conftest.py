"""
Root-level pytest configuration
Disables OpenTelemetry during tests and provides icon source tree builders
"""
import os
import pytest

# Disable OpenTelemetry before any imports that might use it
os.environ.setdefault("OTEL_SDK_DISABLED", "true")
os.environ.setdefault("OTEL_TRACES_EXPORTER", "none")
os.environ.setdefault("OTEL_METRICS_EXPORTER", "none")
os.environ.setdefault("OTEL_LOGS_EXPORTER", "none")

from weights import Weight  # noqa: E402

TRIVIAL_SVG = '<svg><path d="M1 1"/></svg>'


@pytest.fixture
def trivial_svg():
    """Smallest valid icon source"""
    return TRIVIAL_SVG


@pytest.fixture
def all_weights():
    """Six weights mapped to the trivial icon"""
    def _make(content=TRIVIAL_SVG):
        return {weight: content for weight in Weight}
    return _make


@pytest.fixture
def weight_tree(tmp_path):
    """
    Build an asset tree in the weight layout:
    assets/<weight>/<icon>[-<weight>].svg
    """
    assets = tmp_path / "assets"

    def _build(icons, suffixed=True):
        assets.mkdir(exist_ok=True)
        for weight in Weight:
            (assets / weight.value).mkdir(exist_ok=True)
        for name, record in icons.items():
            for weight, content in record.items():
                suffix = weight.file_suffix if suffixed else ""
                (assets / weight.value / f"{name}{suffix}.svg").write_text(content, encoding="utf-8")
        return assets

    return _build


@pytest.fixture
def icon_tree(tmp_path):
    """
    Build an asset tree in the icon layout:
    assets/<icon>/<icon>[-<weight>].svg
    """
    assets = tmp_path / "assets"

    def _build(icons):
        assets.mkdir(exist_ok=True)
        for name, record in icons.items():
            folder = assets / name
            folder.mkdir()
            for weight, content in record.items():
                (folder / f"{name}{weight.file_suffix}.svg").write_text(content, encoding="utf-8")
        return assets

    return _build
