"""Tests for the default plugin list."""

from iconopt.engine.presets import get_plugins, is_animated
from iconopt.engine.registry import register_plugins
from tests.conftest import ANIMATED_SVG, SQUARE_SVG


def test_static_icon():
    plugins = get_plugins()
    assert plugins[0] == "cleanupAttrs"
    assert plugins[-1] == "cleanupIds"
    assert "fixZ" in plugins
    assert "removeUselessStrokeAndFill" in plugins
    assert plugins.index("convertShapeToPath") < plugins.index("fixZ")


def test_animated_icon():
    plugins = get_plugins(animated=True)
    for name in ("fixZ", "convertShapeToPath", "removeUselessStrokeAndFill", "cleanupIds"):
        assert name not in plugins
    assert "removeComments" in plugins


def test_keep_shapes():
    plugins = get_plugins(keep_shapes=True)
    assert "fixZ" not in plugins
    assert "removeHiddenElems" not in plugins
    assert "removeUselessStrokeAndFill" in plugins


def test_no_cleanup_ids():
    assert "cleanupIds" not in get_plugins(cleanup_ids=False)


def test_every_preset_plugin_exists():
    reg = register_plugins()
    assert all(name in reg for name in get_plugins())


def test_is_animated():
    assert is_animated(ANIMATED_SVG)
    assert is_animated('<svg><set attributeName="x" to="1"/></svg>')
    assert not is_animated(SQUARE_SVG)
