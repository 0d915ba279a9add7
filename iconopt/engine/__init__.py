"""iconopt optimizer engine."""

from iconopt.engine.config import OptimizerConfig
from iconopt.engine.context import OptimizeContext
from iconopt.engine.optimizer import optimize
from iconopt.engine.pipeline import Pipeline
from iconopt.engine.registry import Stage, get_registry, plugin, register_plugins

__all__ = [
    "plugin",
    "Stage",
    "get_registry",
    "register_plugins",
    "OptimizerConfig",
    "OptimizeContext",
    "Pipeline",
    "optimize",
]
