"""optimize() — run the plugin pipeline on an icon and post-process the markup."""

from __future__ import annotations

import logging
import re
import time

from iconopt.engine.config import OptimizerConfig
from iconopt.engine.context import OptimizeContext
from iconopt.engine.pipeline import Pipeline
from iconopt.engine.presets import get_plugins, is_animated
from iconopt.engine.registry import register_plugins
from iconopt.svg.document import SVGDocument, iter_elements
from iconopt.svg.ids import replace_ids
from iconopt.svg.namespaces import XLINK_NS, qualified

logger = logging.getLogger(__name__)

_EMPTY_DEFS_RE = re.compile(r"<defs/>")


def optimize(svg: SVGDocument, config: OptimizerConfig | None = None) -> OptimizeContext:
    """Optimize ``svg`` in place. Returns the context of the last pass.

    Plugin failures are recorded in ``ctx.errors``; content that no longer
    parses raises ``ValueError``.
    """
    config = config or OptimizerConfig()
    start = time.perf_counter()
    code = svg.to_string()
    animated = is_animated(code)

    if config.plugins is not None:
        plugins = list(config.plugins)
    else:
        plugins = get_plugins(
            animated=animated,
            keep_shapes=config.keep_shapes,
            cleanup_ids=config.cleanup_ids,
        )
        # Moving attributes onto groups reorders filter/transform application
        if "filter=" in code and "transform=" in code:
            plugins = [p for p in plugins if p != "moveElemsAttrsToGroup"]

    pipeline = Pipeline(plugins, register_plugins())
    passes = max(1, config.max_passes) if config.multipass else 1

    content = code
    stats: dict[str, int] = {}
    for i in range(passes):
        ctx = OptimizeContext(document=SVGDocument(content), config=config, animated=animated)
        pipeline.run(ctx)
        for key, value in ctx.stats.items():
            stats[key] = stats.get(key, 0) + value
        output = ctx.document.to_string()
        shrunk = len(output) < len(content)
        content = output
        if not shrunk:
            break
    logger.debug("Optimizer finished after %d pass(es)", i + 1)
    ctx.stats = stats

    # Sometimes empty definitions are not removed
    content = _EMPTY_DEFS_RE.sub("", content)

    if config.plugins is None and config.cleanup_ids is not False:
        prefix = config.cleanup_ids
        if prefix is True:
            prefix = "svgID"
        content = replace_ids(content, prefix)

    svg.load(content)
    if config.plugins is None or "reusePaths" in config.plugins:
        _unprefix_hrefs(svg)
        content = svg.to_string()
    logger.info(
        "Optimized SVG: %d → %d bytes, %d plugins, %d failed in %.0fms",
        len(code),
        len(content),
        len(pipeline.specs),
        len(ctx.errors),
        (time.perf_counter() - start) * 1000,
    )
    return ctx


def _unprefix_hrefs(svg: SVGDocument) -> None:
    """Rewrite ``xlink:href`` as plain ``href``.

    The XLink declaration is only written while other ``xlink:*`` attributes
    (``xlink:title``, ``xlink:show``…) still use it.
    """
    xlink_href = qualified("href", XLINK_NS)
    for el in iter_elements(svg.root):
        value = el.attrib.pop(xlink_href, None)
        if value is not None and el.get("href") is None:
            el.set("href", value)
