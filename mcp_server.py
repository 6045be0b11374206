import logging
import sys

from fastmcp import FastMCP

import config

mcp = FastMCP("figma-simplify")


def main():
    # stdout is the MCP stdio transport, logs go to stderr
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="[%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    import figma_tools  # noqa: F401  registers the tools on `mcp`

    mcp.run()


if __name__ == "__main__":
    # re-import so figma_tools and this entry point share one `mcp`
    import mcp_server

    mcp_server.main()
