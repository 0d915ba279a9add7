"""Pipeline orchestrator — runs plugins in list order, isolating failures."""

from __future__ import annotations

import logging
import time

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import PluginRegistry, get_registry

logger = logging.getLogger(__name__)


class Pipeline:
    """Runs a fixed plugin list over an OptimizeContext."""

    def __init__(self, plugins: list[str], registry: PluginRegistry | None = None) -> None:
        self.registry = registry or get_registry()
        # Resolve up front so a typo fails before the document is touched
        self.specs = self.registry.resolve(plugins)

    def run(self, ctx: OptimizeContext) -> OptimizeContext:
        """Run one pass of every plugin over ``ctx``."""
        start = time.perf_counter()

        for spec in self.specs:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_plugins.add(spec.name)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.name, elapsed)
            except Exception as e:
                ctx.errors[spec.name] = str(e)
                logger.warning("  %s FAILED: %s", spec.name, e)

        total = (time.perf_counter() - start) * 1000
        logger.debug(
            "Pass complete: %d/%d plugins in %.1fms",
            len(ctx.completed_plugins),
            len(self.specs),
            total,
        )
        return ctx

    @property
    def names(self) -> list[str]:
        return [s.name for s in self.specs]
