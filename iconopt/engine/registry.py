"""Plugin registry — every optimizer plugin is a standalone function registered via decorator.

Usage:
    @plugin(name="removeComments", stage=Stage.CLEANUP)
    def remove_comments(ctx: OptimizeContext) -> None:
        ...

Adding a new plugin = creating one file under ``iconopt/engine/plugins`` with the
decorator. Which plugins run, and in which order, is decided by the plugin list
(see ``iconopt.engine.presets``), not by the registry.
"""

from __future__ import annotations

import enum
import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from iconopt.engine.context import OptimizeContext

logger = logging.getLogger(__name__)


class Stage(enum.IntEnum):
    CLEANUP = 0
    STYLES = 1
    STRUCTURE = 2
    SHAPES = 3
    IDS = 4


@dataclass
class PluginSpec:
    name: str
    stage: Stage
    fn: Callable[["OptimizeContext"], None]
    tags: set[str] = field(default_factory=set)
    description: str = ""


class PluginRegistry:
    """Singleton registry of all plugins."""

    def __init__(self) -> None:
        self._plugins: dict[str, PluginSpec] = {}

    def register(self, spec: PluginSpec) -> None:
        if spec.name in self._plugins:
            raise ValueError(f"Duplicate plugin name: {spec.name}")
        self._plugins[spec.name] = spec
        logger.debug("Registered plugin %s (%s)", spec.name, spec.stage.name)

    def get(self, name: str) -> PluginSpec:
        return self._plugins[name]

    def __contains__(self, name: str) -> bool:
        return name in self._plugins

    def get_stage(self, stage: Stage) -> list[PluginSpec]:
        specs = [s for s in self._plugins.values() if s.stage == stage]
        return sorted(specs, key=lambda s: s.name)

    def all(self) -> list[PluginSpec]:
        return sorted(self._plugins.values(), key=lambda s: (s.stage, s.name))

    def resolve(self, names: list[str]) -> list[PluginSpec]:
        """Look up plugins in the given order. Unknown names raise before anything runs."""
        missing = [n for n in names if n not in self._plugins]
        if missing:
            raise ValueError(f"Unknown plugin(s): {', '.join(missing)}")
        return [self._plugins[n] for n in names]

    @property
    def count(self) -> int:
        return len(self._plugins)


# Module-level singleton
_registry = PluginRegistry()


def get_registry() -> PluginRegistry:
    return _registry


def plugin(
    *,
    name: str,
    stage: Stage,
    tags: set[str] | None = None,
    description: str = "",
):
    """Decorator to register a plugin function."""

    def decorator(fn: Callable[["OptimizeContext"], None]):
        spec = PluginSpec(
            name=name,
            stage=stage,
            fn=fn,
            tags=tags or set(),
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator


def register_plugins() -> PluginRegistry:
    """Import all plugin modules so @plugin decorators fire."""
    package = importlib.import_module("iconopt.engine.plugins")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"iconopt.engine.plugins.{module_name}")
    return _registry
