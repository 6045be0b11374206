import logging

import requests

import config
from mcp_server import mcp
from transform import parse_figma_file_response, parse_figma_response

logger = logging.getLogger(__name__)


def figma_api_get(path, params=None):
    if not config.FIGMA_API_KEY:
        raise RuntimeError("Missing FIGMA_API_KEY in environment or .env")
    headers = {"X-Figma-Token": config.FIGMA_API_KEY}
    url = f"{config.FIGMA_API_BASE}{path}"
    logger.debug("GET %s params=%s", url, params)
    res = requests.get(url, headers=headers, params=params, timeout=config.FIGMA_TIMEOUT)
    res.raise_for_status()
    return res.json()


def fetch_simplified_design(fileKey: str, nodeId: str = None, depth: int = None) -> dict:
    """Fetch a file, or one node of it, and return the simplified design."""
    if nodeId:
        nodeId = nodeId.replace("-", ":")
        params = {"ids": nodeId}
        if depth:
            params["depth"] = depth
        raw = figma_api_get(f"/files/{fileKey}/nodes", params=params)
        nodes = raw.get("nodes") or {}
        if nodeId not in nodes:
            raise LookupError(f"Node ID '{nodeId}' not found in response. Available nodes: {list(nodes)}")
        design = parse_figma_response(raw)
    else:
        params = {"depth": depth} if depth else None
        raw = figma_api_get(f"/files/{fileKey}", params=params)
        design = parse_figma_file_response(raw)

    logger.info("Simplified %s: %d top-level node(s)", fileKey, len(design["nodes"]))
    return design


def get_figma_data(fileKey: str, nodeId: str = None, depth: int = None):
    try:
        design = fetch_simplified_design(fileKey, nodeId, depth)
    except Exception as e:
        logger.exception("get_figma_data failed for %s", fileKey)
        return {"error": f"Failed to process Figma data: {e}"}

    return {
        "instructions": "Use this layout and style data to recreate the UI. "
                        "Colors are hex with a separate opacity; lineHeight is in em, "
                        "letterSpacing in percent of the font size.",
        "design": design,
    }


# registered separately so the plain function stays callable
mcp.tool(
    name="get_figma_data",
    description="""
    Fetches a Figma file or node and simplifies it into a uniform node tree
    (text, text style, fills, strokes, radius, opacity, layout, children).

    Use this tool when you want structured layout/styling data of a UI for code generation.
    """
)(get_figma_data)
