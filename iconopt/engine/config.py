"""Optimizer configuration — per-run options."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class OptimizerConfig:
    """Controls which plugins run and how the result is post-processed."""

    # Custom plugin list; None selects the default preset
    plugins: list[str] | None = None

    # Run the plugin list repeatedly while the output keeps shrinking
    multipass: bool = True
    max_passes: int = 10

    # Skip plugins that change shapes (hidden elements, shape→path, fixZ)
    keep_shapes: bool = False

    # Prefix for replaced ids, a callable mapping old id → new id, or False to keep ids
    cleanup_ids: str | Callable[[str], str] | bool = "svgID"

    # Path data output
    precision: int | None = None
    no_space_after_flags: bool = True
