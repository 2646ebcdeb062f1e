"""
n8n FastMCP Server
------------------
MCP tool server that drives an n8n instance through its REST API.

Tools exposed:
 - n8n_health
 - n8n_list_workflows
 - n8n_get_workflow
 - n8n_activate_workflow
 - n8n_deactivate_workflow
 - n8n_list_executions

Every tool returns text: strings verbatim, anything else as indented JSON.
Runs over stdio by default; see MCP_TRANSPORT in n8n_mcp.config.
"""

from typing import Annotated, Any
from urllib.parse import urlencode

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from n8n_mcp import __version__
from n8n_mcp.client import N8nClient
from n8n_mcp.config import get_base_url, get_http_bind, get_transport, load_environment
from n8n_mcp.errors import ConfigurationError, RemoteApiError
from n8n_mcp.formatting import as_text, filter_by_active
from n8n_mcp.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

WORKFLOWS_PATH = "/api/v1/workflows"
EXECUTIONS_PATH = "/api/v1/executions"

WorkflowId = Annotated[int | float | str, Field(description="Workflow id")]

# Shared gateway; holds no connection state.
client = N8nClient()

mcp = FastMCP(name="n8n", version=__version__)


async def _n8n(method: str, path: str, body: Any = None) -> Any:
    """
    Call n8n and turn gateway errors into MCP tool errors.

    RemoteApiError keeps the upstream body in the error text so the host
    sees what n8n said.
    """
    try:
        return await client.request(method, path, body)
    except ConfigurationError as e:
        logger.error("Configuration error for %s %s: %s", method, path, e)
        raise ToolError(str(e)) from e
    except RemoteApiError as e:
        message = str(e)
        if e.details is not None:
            message = f"{message}\n{as_text(e.details)}"
        raise ToolError(message) from e


# -----------------------------
# Tools
# -----------------------------


@mcp.tool(name="n8n_health", description="Check n8n health endpoint (/healthz).")
async def n8n_health() -> str:
    return as_text(await client.health())


@mcp.tool(
    name="n8n_list_workflows",
    description="List workflows via n8n REST API (/api/v1/workflows).",
)
async def n8n_list_workflows(
    active: Annotated[bool | None, Field(description="Filter by active status (true/false).")] = None,
) -> str:
    data = await _n8n("GET", WORKFLOWS_PATH)
    if active is None:
        return as_text(data)
    return as_text(filter_by_active(data, active))


@mcp.tool(
    name="n8n_get_workflow",
    description="Get a workflow by id (/api/v1/workflows/{id}).",
)
async def n8n_get_workflow(id: WorkflowId) -> str:  # noqa: A002
    return as_text(await _n8n("GET", f"{WORKFLOWS_PATH}/{id}"))


@mcp.tool(
    name="n8n_activate_workflow",
    description="Activate a workflow (/api/v1/workflows/{id}/activate).",
)
async def n8n_activate_workflow(id: WorkflowId) -> str:  # noqa: A002
    return as_text(await _n8n("POST", f"{WORKFLOWS_PATH}/{id}/activate"))


@mcp.tool(
    name="n8n_deactivate_workflow",
    description="Deactivate a workflow (/api/v1/workflows/{id}/deactivate).",
)
async def n8n_deactivate_workflow(id: WorkflowId) -> str:  # noqa: A002
    return as_text(await _n8n("POST", f"{WORKFLOWS_PATH}/{id}/deactivate"))


@mcp.tool(name="n8n_list_executions", description="List executions (/api/v1/executions).")
async def n8n_list_executions(
    workflowId: Annotated[  # noqa: N803
        int | float | str | None, Field(description="Filter executions by workflow id")
    ] = None,
    limit: Annotated[int | None, Field(ge=1, le=250, description="Limit results (1-250)")] = None,
) -> str:
    params = {}
    if workflowId is not None:
        params["workflowId"] = str(workflowId)
    if limit is not None:
        params["limit"] = str(limit)
    path = f"{EXECUTIONS_PATH}?{urlencode(params)}" if params else EXECUTIONS_PATH
    return as_text(await _n8n("GET", path))


# -----------------------------
# Start MCP server
# -----------------------------
def main():
    load_environment()
    log_file = setup_logging()
    transport = get_transport()
    logger.info("Starting n8n MCP server (transport=%s, n8n=%s, log=%s)", transport, get_base_url(), log_file)

    if transport == "stdio":
        mcp.run()
        return

    host, port = get_http_bind()
    logger.info("Listening on http://%s:%s", host, port)
    mcp.run(transport=transport, host=host, port=port)


if __name__ == "__main__":
    main()
