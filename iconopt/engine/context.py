"""OptimizeContext — the single mutable state object flowing through all plugins."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from iconopt.engine.config import OptimizerConfig
from iconopt.svg.document import SVGDocument


@dataclass
class OptimizeContext:
    """Shared state for one optimizer pass."""

    document: SVGDocument
    config: OptimizerConfig = field(default_factory=OptimizerConfig)
    # True when the icon contains <animate> or <set>
    animated: bool = False

    # Counters reported by plugins, summed over passes
    stats: dict[str, int] = field(default_factory=dict)

    # --- Pipeline metadata ---
    completed_plugins: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def root(self) -> ET.Element:
        return self.document.root

    def count(self, key: str, amount: int = 1) -> None:
        if amount:
            self.stats[key] = self.stats.get(key, 0) + amount
