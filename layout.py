# layout.py

AXIS_ALIGN = {
    "MIN": "flex-start",
    "MAX": "flex-end",
    "CENTER": "center",
    "SPACE_BETWEEN": "space-between",
    "BASELINE": "baseline",
}

LAYOUT_MODES = {"HORIZONTAL": "row", "VERTICAL": "column"}


def _box(node: dict) -> dict:
    box = node.get("absoluteBoundingBox")
    return box if isinstance(box, dict) else {}


def _px(value) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}px"


def _padding(node: dict):
    sides = [node.get(k) or 0 for k in ("paddingTop", "paddingRight", "paddingBottom", "paddingLeft")]
    if not any(sides):
        return None
    top, right, bottom, left = sides
    if top == bottom and right == left:
        if top == right:
            return _px(top)
        return f"{_px(top)} {_px(right)}"
    return " ".join(_px(s) for s in sides)


def _sizing(node: dict):
    sizing = {
        "horizontal": node.get("layoutSizingHorizontal"),
        "vertical": node.get("layoutSizingVertical"),
    }
    sizing = {k: v.lower() for k, v in sizing.items() if isinstance(v, str)}
    return sizing or None


def _overflow(node: dict):
    direction = node.get("overflowDirection") or ""
    axes = []
    if "HORIZONTAL" in direction:
        axes.append("x")
    if "VERTICAL" in direction:
        axes.append("y")
    return axes or None


def _is_absolute(node: dict, parent: dict) -> bool:
    if node.get("layoutPositioning") == "ABSOLUTE":
        return True
    return parent is not None and parent.get("layoutMode") not in LAYOUT_MODES


def build_simplified_layout(node: dict, parent: dict = None) -> dict:
    """
    Describe how `node` lays out its children and sits inside `parent`.

    Children of an auto-layout frame are positioned by the flow, everything
    else gets an absolute location relative to the parent's bounding box.
    """
    mode = LAYOUT_MODES.get(node.get("layoutMode"), "none")
    layout = {"mode": mode}

    if mode != "none":
        spacing = node.get("itemSpacing")
        layout.update({
            "justifyContent": AXIS_ALIGN.get(node.get("primaryAxisAlignItems")),
            "alignItems": AXIS_ALIGN.get(node.get("counterAxisAlignItems")),
            "wrap": True if node.get("layoutWrap") == "WRAP" else None,
            "gap": _px(spacing) if spacing else None,
            "padding": _padding(node),
        })

    layout["sizing"] = _sizing(node)
    if node.get("layoutAlign") == "STRETCH":
        layout["alignSelf"] = "stretch"
    layout["grow"] = node.get("layoutGrow") or None
    layout["overflowScroll"] = _overflow(node)

    box = _box(node)
    if _is_absolute(node, parent):
        layout["position"] = "absolute"
        parent_box = _box(parent or {})
        if all(k in b for b in (box, parent_box) for k in ("x", "y")):
            layout["locationRelativeToParent"] = {
                "x": box["x"] - parent_box["x"],
                "y": box["y"] - parent_box["y"],
            }
    if "width" in box and "height" in box:
        layout["dimensions"] = {"width": box["width"], "height": box["height"]}

    return {k: v for k, v in layout.items() if v is not None}
