"""Element and attribute groups from SVG 1.1, as plugins need them."""

from __future__ import annotations

CONTAINER_ELEMENTS = {
    "a", "defs", "g", "marker", "mask", "missing-glyph", "pattern", "svg", "switch", "symbol",
    "clipPath", "glyph",
}

SHAPE_ELEMENTS = {"circle", "ellipse", "line", "path", "polygon", "polyline", "rect"}

ANIMATION_ELEMENTS = {"animate", "animateColor", "animateMotion", "animateTransform", "set"}

# Attributes that must stay even when empty
CONDITIONAL_PROCESSING_ATTRS = {"requiredExtensions", "requiredFeatures", "systemLanguage"}

PRESENTATION_ATTRS = {
    "alignment-baseline", "baseline-shift", "clip", "clip-path", "clip-rule", "color",
    "color-interpolation", "color-interpolation-filters", "color-profile", "color-rendering",
    "cursor", "direction", "display", "dominant-baseline", "enable-background", "fill",
    "fill-opacity", "fill-rule", "filter", "flood-color", "flood-opacity", "font",
    "font-family", "font-size", "font-size-adjust", "font-stretch", "font-style",
    "font-variant", "font-weight", "glyph-orientation-horizontal",
    "glyph-orientation-vertical", "image-rendering", "letter-spacing", "lighting-color",
    "marker", "marker-end", "marker-mid", "marker-start", "mask", "opacity", "overflow",
    "paint-order", "pointer-events", "shape-rendering", "stop-color", "stop-opacity",
    "stroke", "stroke-dasharray", "stroke-dashoffset", "stroke-linecap", "stroke-linejoin",
    "stroke-miterlimit", "stroke-opacity", "stroke-width", "text-anchor",
    "text-decoration", "text-overflow", "text-rendering", "transform", "unicode-bidi",
    "vector-effect", "visibility", "word-spacing", "writing-mode",
}

# Presentation attributes a child inherits from its group
INHERITABLE_ATTRS = {
    "clip-rule", "color", "color-interpolation", "color-interpolation-filters",
    "color-profile", "color-rendering", "cursor", "direction", "dominant-baseline",
    "fill", "fill-opacity", "fill-rule", "font", "font-family", "font-size",
    "font-size-adjust", "font-stretch", "font-style", "font-variant", "font-weight",
    "glyph-orientation-horizontal", "glyph-orientation-vertical", "image-rendering",
    "letter-spacing", "marker", "marker-end", "marker-mid", "marker-start",
    "paint-order", "pointer-events", "shape-rendering", "stroke", "stroke-dasharray",
    "stroke-dashoffset", "stroke-linecap", "stroke-linejoin", "stroke-miterlimit",
    "stroke-opacity", "stroke-width", "text-anchor", "text-rendering", "visibility",
    "word-spacing", "writing-mode",
}

# Color-valued attributes
COLOR_ATTRS = {"color", "fill", "flood-color", "lighting-color", "stop-color", "stroke"}

# Non-inheritable presentation attributes that still apply to a whole group
GROUP_ONLY_ATTRS = {
    "clip-path", "display", "filter", "mask", "opacity", "text-decoration", "transform",
    "unicode-bidi",
}

# Attributes whose value may reference another element by url(#id)
REFERENCE_ATTRS = {
    "clip-path", "color-profile", "fill", "filter", "marker-end", "marker-mid",
    "marker-start", "mask", "stroke", "style",
}

# Named colors that are longer than their hex form
NAMED_COLORS = {
    "aliceblue": "#f0f8ff", "antiquewhite": "#faebd7", "aquamarine": "#7fffd4",
    "black": "#000", "blanchedalmond": "#ffebcd", "blueviolet": "#8a2be2",
    "burlywood": "#deb887", "cadetblue": "#5f9ea0", "chartreuse": "#7fff00",
    "chocolate": "#d2691e", "cornflowerblue": "#6495ed", "cornsilk": "#fff8dc",
    "darkblue": "#00008b", "darkcyan": "#008b8b", "darkgoldenrod": "#b8860b",
    "darkgray": "#a9a9a9", "darkgreen": "#006400", "darkgrey": "#a9a9a9",
    "darkkhaki": "#bdb76b", "darkmagenta": "#8b008b", "darkolivegreen": "#556b2f",
    "darkorange": "#ff8c00", "darkorchid": "#9932cc", "darksalmon": "#e9967a",
    "darkseagreen": "#8fbc8f", "darkslateblue": "#483d8b", "darkslategray": "#2f4f4f",
    "darkslategrey": "#2f4f4f", "darkturquoise": "#00ced1", "darkviolet": "#9400d3",
    "deeppink": "#ff1493", "deepskyblue": "#00bfff", "dodgerblue": "#1e90ff",
    "firebrick": "#b22222", "floralwhite": "#fffaf0", "forestgreen": "#228b22",
    "fuchsia": "#f0f", "gainsboro": "#dcdcdc", "ghostwhite": "#f8f8ff",
    "goldenrod": "#daa520", "greenyellow": "#adff2f", "honeydew": "#f0fff0",
    "indianred": "#cd5c5c", "lavender": "#e6e6fa", "lavenderblush": "#fff0f5",
    "lawngreen": "#7cfc00", "lemonchiffon": "#fffacd", "lightblue": "#add8e6",
    "lightcoral": "#f08080", "lightcyan": "#e0ffff", "lightgoldenrodyellow": "#fafad2",
    "lightgray": "#d3d3d3", "lightgreen": "#90ee90", "lightgrey": "#d3d3d3",
    "lightpink": "#ffb6c1", "lightsalmon": "#ffa07a", "lightseagreen": "#20b2aa",
    "lightskyblue": "#87cefa", "lightslategray": "#789", "lightslategrey": "#789",
    "lightsteelblue": "#b0c4de", "lightyellow": "#ffffe0", "limegreen": "#32cd32",
    "magenta": "#f0f", "mediumaquamarine": "#66cdaa", "mediumblue": "#0000cd",
    "mediumorchid": "#ba55d3", "mediumpurple": "#9370db", "mediumseagreen": "#3cb371",
    "mediumslateblue": "#7b68ee", "mediumspringgreen": "#00fa9a",
    "mediumturquoise": "#48d1cc", "mediumvioletred": "#c71585", "midnightblue": "#191970",
    "mintcream": "#f5fffa", "mistyrose": "#ffe4e1", "moccasin": "#ffe4b5",
    "navajowhite": "#ffdead", "olivedrab": "#6b8e23", "orangered": "#ff4500",
    "palegoldenrod": "#eee8aa", "palegreen": "#98fb98", "paleturquoise": "#afeeee",
    "palevioletred": "#db7093", "papayawhip": "#ffefd5", "peachpuff": "#ffdab9",
    "powderblue": "#b0e0e6", "rebeccapurple": "#639", "rosybrown": "#bc8f8f",
    "royalblue": "#4169e1", "saddlebrown": "#8b4513", "sandybrown": "#f4a460",
    "seagreen": "#2e8b57", "seashell": "#fff5ee", "slateblue": "#6a5acd",
    "slategray": "#708090", "slategrey": "#708090", "springgreen": "#00ff7f",
    "steelblue": "#4682b4", "turquoise": "#40e0d0", "whitesmoke": "#f5f5f5",
    "yellow": "#ff0", "yellowgreen": "#9acd32", "white": "#fff",
}

# Attribute order used by sortAttrs; anything else sorts alphabetically after these
ATTR_ORDER = [
    "id", "width", "height", "x", "x1", "x2", "y", "y1", "y2", "cx", "cy", "r",
    "fill", "stroke", "marker", "d", "points",
]

# Hex colors whose name is shorter
COLOR_SHORT_NAMES = {
    "#f0ffff": "azure", "#f5f5dc": "beige", "#ffe4c4": "bisque", "#a52a2a": "brown",
    "#ff7f50": "coral", "#ffd700": "gold", "#808080": "gray", "#008000": "green",
    "#4b0082": "indigo", "#fffff0": "ivory", "#f0e68c": "khaki", "#faf0e6": "linen",
    "#800000": "maroon", "#000080": "navy", "#808000": "olive", "#ffa500": "orange",
    "#da70d6": "orchid", "#cd853f": "peru", "#ffc0cb": "pink", "#dda0dd": "plum",
    "#800080": "purple", "#f00": "red", "#ff0000": "red", "#fa8072": "salmon",
    "#a0522d": "sienna", "#c0c0c0": "silver", "#fffafa": "snow", "#d2b48c": "tan",
    "#008080": "teal", "#ff6347": "tomato", "#ee82ee": "violet", "#f5deb3": "wheat",
}
