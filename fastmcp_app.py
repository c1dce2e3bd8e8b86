from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from fastmcp import FastMCP

from catalog_client import CatalogClient
from config import Settings
from models import ActionRequestOptions
from prompts import PromptDefinition, PromptRegistry
from resource_docs import RESOURCE_CATALOG, ResourceSpec


def build_tools(client: CatalogClient) -> Dict[str, Callable[..., Any]]:
    """Return the catalog tool callables keyed by their MCP tool name."""

    def vra_list_resources(limit: Optional[int] = None) -> List[dict]:
        return [resource.as_dict() for resource in client.get_resources(limit)]

    def vra_get_resource_by_name(name: str) -> dict:
        return client.get_resource_by_name(name)

    def vra_get_resource_by_id(resource_id: str) -> dict:
        return client.get_resource_by_id(resource_id)

    def vra_list_resource_actions(resource_name: str) -> List[Any]:
        return client.get_resource_actions(resource_name)

    def vra_get_action_template(resource_id: str, action_id: str) -> Any:
        return client.get_resource_action_template(resource_id, action_id)

    def vra_list_action_requests(resource_name: str, action_name: str) -> List[Any]:
        options = ActionRequestOptions(resource_name=resource_name, action_name=action_name)
        return client.get_resource_action_requests(options)

    def vra_submit_action(resource_id: str, action_id: str, template: dict) -> Any:
        return client.submit_resource_action(resource_id, action_id, template)

    def vra_request_action(resource_name: str, action_name: str, data: Optional[dict] = None) -> Any:
        options = ActionRequestOptions(resource_name=resource_name, action_name=action_name)
        return client.request_resource_action(options, data)

    tools = (
        vra_list_resources,
        vra_get_resource_by_name,
        vra_get_resource_by_id,
        vra_list_resource_actions,
        vra_get_action_template,
        vra_list_action_requests,
        vra_submit_action,
        vra_request_action,
    )
    return {fn.__name__: fn for fn in tools}


def _prompt_text(definition: PromptDefinition) -> Callable[[], str]:
    def render() -> str:
        return definition.text

    render.__name__ = definition.name.replace("-", "_")
    return render


def _resource_text(spec: ResourceSpec) -> Callable[[], str]:
    def read() -> str:
        return spec.read()

    read.__name__ = spec.filename.rsplit(".", 1)[0]
    return read


def create_mcp(settings: Optional[Settings] = None, catalog_client: Optional[CatalogClient] = None) -> FastMCP:
    """Create and configure a FastMCP server exposing the vRA catalog tools.

    Tools are registered with vra_* names; prompts and documentation resources
    come from :class:`PromptRegistry` and ``RESOURCE_CATALOG``.
    """
    cfg = settings or Settings.from_env()
    client = catalog_client or CatalogClient.from_settings(cfg)

    mcp = FastMCP(name="vRA Catalog MCP Server")

    # ---------------------------- Tools ---------------------------------
    for name, fn in build_tools(client).items():
        mcp.tool(name=name)(fn)

    # ------------------------- Resources/Prompts ------------------------
    registry = PromptRegistry()
    for meta in registry.list_prompts():
        definition = registry.get_prompt(meta["name"])
        mcp.prompt(name=definition.name, description=definition.description)(_prompt_text(definition))

    for spec in RESOURCE_CATALOG:
        mcp.resource(spec.uri, description=spec.description, mime_type="text/markdown")(_resource_text(spec))

    return mcp
