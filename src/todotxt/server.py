"""
todotxt MCP server entry point.

Startup sequence:
1. Read TODO_FILE, API_ENABLED, API_PORT and LOG_LEVEL from environment
2. Configure logging on stderr (stdout carries the MCP stdio transport)
3. Start REST API server in background thread (if API_ENABLED)
4. Register all MCP tools
5. Run MCP server (stdio transport)
"""

import logging
import os
import sys
import threading
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from todotxt.tools import register_task_tools

log = logging.getLogger(__name__)


def _start_api_server(default_file: Optional[Path], port: int) -> None:
    """Run the FastAPI/uvicorn server in a daemon thread."""
    import uvicorn

    from todotxt.api.app import create_app

    app = create_app(default_file)
    log.info("Starting REST API on port %d", port)
    uvicorn.run(app, host="0.0.0.0", port=port, log_level="warning")


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    todo_file_env = os.environ.get("TODO_FILE", "")
    default_file = Path(todo_file_env) if todo_file_env else None
    if default_file is None:
        log.info("TODO_FILE not set; file tools require an explicit file_path")
    elif not default_file.parent.is_dir():
        log.error("TODO_FILE directory does not exist: %s", default_file.parent)
        sys.exit(1)
    else:
        log.info("Todo file: %s", default_file)

    api_enabled = os.environ.get("API_ENABLED", "true").lower() in ("true", "1", "yes")
    if api_enabled:
        api_port = int(os.environ.get("API_PORT", "9410"))
        api_thread = threading.Thread(
            target=_start_api_server, args=(default_file, api_port), daemon=True
        )
        api_thread.start()

    mcp = FastMCP("todotxt-mcp")
    register_task_tools(mcp, default_file)

    log.info("Starting todotxt-mcp server")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
