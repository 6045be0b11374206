# transform.py

import math

from layout import build_simplified_layout

GRADIENT_TYPES = {
    "GRADIENT_LINEAR",
    "GRADIENT_RADIAL",
    "GRADIENT_ANGULAR",
    "GRADIENT_DIAMOND",
}


class PaintError(ValueError):
    pass


class UnrecognizedPaintKind(PaintError):
    def __init__(self, paint_type):
        super().__init__(f"Unknown paint type: {paint_type}")
        self.paint_type = paint_type


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _format_number(value) -> str:
    """Render a number the way it should appear inside a CSS-like unit string."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def convert_color(color: dict, opacity: float = 1) -> dict:
    """
    Convert a 0-1 RGBA color into {"hex": "#RRGGBB", "opacity": float}.

    `opacity` is the paint's own opacity; it composes multiplicatively with
    the alpha channel. Channel values are not range-checked.
    """
    r = _round_half_up(color["r"] * 255)
    g = _round_half_up(color["g"] * 255)
    b = _round_half_up(color["b"] * 255)
    a = _round_half_up(opacity * color["a"] * 100) / 100

    return {"hex": "#%02X%02X%02X" % (r, g, b), "opacity": a}


def parse_paint(raw: dict) -> dict:
    if not isinstance(raw, dict):
        raise PaintError(f"Paint must be a mapping, got {type(raw).__name__}")
    paint_type = raw.get("type")

    if paint_type == "IMAGE":
        return {
            "type": "IMAGE",
            "imageRef": raw.get("imageRef"),
            "scaleMode": raw.get("scaleMode"),
        }

    if paint_type == "SOLID":
        if not isinstance(raw.get("color"), dict):
            raise PaintError("SOLID paint has no color")
        opacity = raw.get("opacity")
        color = convert_color(raw["color"], opacity if _is_number(opacity) else 1)
        return {"type": "SOLID", "hex": color["hex"], "opacity": color["opacity"]}

    if paint_type in GRADIENT_TYPES:
        # stop order is the interpolation order
        return {
            "type": paint_type,
            "gradientHandlePositions": raw.get("gradientHandlePositions"),
            "gradientStops": [
                {"position": stop["position"], "color": convert_color(stop["color"])}
                for stop in raw.get("gradientStops") or []
            ],
        }

    raise UnrecognizedPaintKind(paint_type)


# -------------------- attribute extractors --------------------

def extract_text(node: dict) -> dict:
    characters = node.get("characters")
    if isinstance(characters, str) and characters:
        return {"text": characters}
    return {}


def extract_text_style(node: dict) -> dict:
    style = node.get("style")
    if not isinstance(style, dict):
        return {}

    font_size, line_height_px, letter_spacing = (
        v if _is_number(v) else None
        for v in (style.get("fontSize"), style.get("lineHeightPx"), style.get("letterSpacing"))
    )

    text_style = {
        "fontFamily": style.get("fontFamily"),
        "fontWeight": style.get("fontWeight"),
        "fontSize": font_size,
        "lineHeight": None,
        "letterSpacing": None,
        "textCase": style.get("textCase"),
        "textAlignHorizontal": style.get("textAlignHorizontal"),
        "textAlignVertical": style.get("textAlignVertical"),
    }
    if line_height_px and font_size:
        text_style["lineHeight"] = f"{_format_number(line_height_px / font_size)}em"
    # 0 is the default spacing, "0%" carries no information
    if letter_spacing and font_size:
        percent = letter_spacing / font_size * 100
        text_style["letterSpacing"] = f"{_format_number(percent)}%"

    text_style = {k: v for k, v in text_style.items() if v is not None}
    if not text_style:
        return {}
    return {"textStyle": text_style}


def extract_paints(node: dict) -> dict:
    paints = {}
    for key in ("fills", "strokes"):
        if isinstance(node.get(key), list):
            paints[key] = [parse_paint(p) for p in node[key]]
    return paints


def is_stroke_weights(value) -> bool:
    return isinstance(value, dict) and all(
        _is_number(value.get(side)) for side in ("top", "right", "bottom", "left")
    )


def extract_stroke_geometry(node: dict, strokes: list = None) -> dict:
    """Stroke weight only makes sense next to a stroke, so it needs `strokes`."""
    geometry = {}
    if _is_number(node.get("strokeWeight")) and strokes:
        geometry["strokeWeight"] = node["strokeWeight"]
    if isinstance(node.get("strokeDashes"), list):
        geometry["strokeDashes"] = node["strokeDashes"]
    weights = node.get("individualStrokeWeights")
    if is_stroke_weights(weights):
        geometry["individualStrokeWeights"] = {
            "top": weights["top"],
            "right": weights["right"],
            "bottom": weights["bottom"],
            "left": weights["left"],
        }
    return geometry


def extract_opacity(node: dict) -> dict:
    if _is_number(node.get("opacity")):
        return {"opacity": node["opacity"]}
    return {}


def extract_border_radius(node: dict) -> dict:
    if _is_number(node.get("cornerRadius")):
        return {"borderRadius": f"{_format_number(node['cornerRadius'])}px"}
    return {}


def is_rectangle(value) -> bool:
    return isinstance(value, dict) and all(
        _is_number(value.get(k)) for k in ("x", "y", "width", "height")
    )


def extract_bounding_box(node: dict) -> dict:
    """Absolute canvas position and size. `layout` holds the parent-relative view."""
    box = node.get("absoluteBoundingBox")
    if is_rectangle(box):
        return {
            "boundingBox": {
                "x": box["x"],
                "y": box["y"],
                "width": box["width"],
                "height": box["height"],
            }
        }
    return {}


# -------------------- node tree --------------------

def simplify_node(node: dict, parent: dict = None) -> dict:
    """Build one simplified node without its children."""
    simplified = {
        "id": node.get("id"),
        "name": node.get("name"),
        "type": node.get("type"),
    }
    simplified.update(extract_bounding_box(node))
    simplified.update(extract_text(node))
    simplified.update(extract_text_style(node))
    simplified.update(extract_paints(node))
    simplified.update(extract_stroke_geometry(node, simplified.get("strokes")))
    simplified.update(extract_opacity(node))
    simplified.update(extract_border_radius(node))
    simplified["layout"] = build_simplified_layout(node, parent)
    return simplified


def parse_node(node: dict, parent: dict = None) -> dict:
    """
    Transform a raw Figma node and all of its descendants.

    The tree is walked with an explicit stack instead of recursion, so very
    deep documents don't run into the interpreter's recursion limit.
    """
    result = []
    stack = [(node, parent, result)]

    while stack:
        raw, raw_parent, siblings = stack.pop()
        simplified = simplify_node(raw, raw_parent)
        siblings.append(simplified)

        children = raw.get("children")
        if isinstance(children, list) and children:
            simplified["children"] = []
            # reversed so siblings pop in source order
            for child in reversed(children):
                stack.append((child, raw, simplified["children"]))

    return result[0]


def parse_figma_file_response(data: dict) -> dict:
    document = data.get("document") or {}
    nodes = [parse_node(n) for n in document.get("children") or []]

    return {
        "name": data.get("name"),
        "lastModified": data.get("lastModified"),
        "thumbnailUrl": data.get("thumbnailUrl") or "",
        "nodes": nodes,
    }


def parse_figma_response(data: dict) -> dict:
    nodes = [parse_node(n["document"]) for n in (data.get("nodes") or {}).values()]

    return {
        "name": data.get("name"),
        "lastModified": data.get("lastModified"),
        "thumbnailUrl": data.get("thumbnailUrl") or "",
        "nodes": nodes,
    }
