"""Default plugin list for icons."""

from __future__ import annotations

from collections.abc import Callable

# Always safe, in run order
_BASE_PLUGINS = [
    "cleanupAttrs",
    "removeComments",
    "removeUselessDefs",
    "removeEditorsNSData",
    "removeEmptyAttrs",
    "removeEmptyContainers",
    "convertStyleToAttrs",
    "convertColors",
    "removeNonInheritableGroupAttrs",
    "moveElemsAttrsToGroup",
    "moveGroupAttrsToElems",
    "collapseGroups",
    "sortDefsChildren",
    "sortAttrs",
]

# Break animations
_STATIC_ONLY_PLUGINS = [
    "removeUselessStrokeAndFill",
]

# Change shapes, or break animations
_SHAPE_PLUGINS = [
    "removeHiddenElems",
    "convertShapeToPath",
    "convertEllipseToCircle",
    "reusePaths",
    "fixZ",
]


def get_plugins(
    animated: bool = False,
    keep_shapes: bool = False,
    cleanup_ids: str | Callable[[str], str] | bool = "svgID",
) -> list[str]:
    """Plugin list for an icon.

    ``cleanupIds`` misbehaves on animated icons, so it is skipped for them too.
    """
    plugins = list(_BASE_PLUGINS)
    if not animated:
        plugins.extend(_STATIC_ONLY_PLUGINS)
    if not animated and not keep_shapes:
        plugins.extend(_SHAPE_PLUGINS)
    if not animated and cleanup_ids is not False:
        plugins.append("cleanupIds")
    return plugins


def is_animated(content: str) -> bool:
    return "<animate" in content or "<set" in content
