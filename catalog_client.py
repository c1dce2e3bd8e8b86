
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import quote

from _template_utils import fill_template_data
from config import Settings
from errors import KeyLookupError, NotFoundError
from gateway import GatewayResponse, HttpGateway, classify_response
from lookup import collection_content, find_index_by_key
from models import ActionRequestOptions, CatalogResource, ResolvedAction, map_resource

RESOURCES_PATH = "/catalog-service/api/consumer/resources"
DEFAULT_LIMIT = 1000

ActionOptions = Union[ActionRequestOptions, Mapping[str, Any]]


def _segment(value: str) -> str:
    return quote(str(value), safe="")


class CatalogClient:
    """Consumer-side helper for the vRA catalog-service resources API."""

    def __init__(self, gateway: HttpGateway, *, default_limit: int = DEFAULT_LIMIT) -> None:
        self.gateway = gateway
        self.default_limit = default_limit

    @classmethod
    def from_settings(cls, settings: Settings) -> "CatalogClient":
        gateway = HttpGateway(
            base_url=settings.base_url,
            username=settings.username,
            password=settings.password,
            tenant=settings.tenant,
            token=settings.token,
            verify_ssl=settings.verify_ssl,
            timeout=settings.timeout,
        )
        return cls(gateway, default_limit=settings.default_limit)

    # ------------------------------------------------------------------
    # URL helpers
    # ------------------------------------------------------------------
    def _resources_url(self) -> str:
        return f"{self.gateway.base_url}{RESOURCES_PATH}"

    def _actions_url(self, resource_id: str) -> str:
        return f"{self._resources_url()}/{_segment(resource_id)}/actions"

    def _requests_url(self, resource_id: str, action_id: str) -> str:
        return f"{self._actions_url(resource_id)}/{_segment(action_id)}/requests"

    def _get(self, url: str, *, context: str) -> Any:
        return classify_response(self.gateway.get(url), context=context)

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------
    def _list_raw_resources(self, limit: Optional[int], *, context: str) -> List[Any]:
        if limit is None:
            limit = self.default_limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")
        body = self._get(f"{self._resources_url()}?limit={limit}", context=context)
        return collection_content(body)

    def get_resources(self, limit: Optional[int] = None) -> List[CatalogResource]:
        records = self._list_raw_resources(limit, context="get_resources")
        return [map_resource(record) for record in records]

    def _find_resource(self, key: str, field: str, *, context: str) -> Dict[str, Any]:
        records = self._list_raw_resources(None, context=context)
        try:
            return records[find_index_by_key(records, key, field)]
        except KeyLookupError:
            raise NotFoundError(key, field=field) from None

    def get_resource_by_name(self, name: str) -> Dict[str, Any]:
        return self._find_resource(name, "name", context="get_resource_by_name")

    def get_resource_by_id(self, resource_id: str) -> Dict[str, Any]:
        return self._find_resource(resource_id, "id", context="get_resource_by_id")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def _actions_for(self, resource: Mapping[str, Any]) -> List[Any]:
        body = self._get(self._actions_url(resource["id"]), context="get_resource_actions")
        return collection_content(body)

    def get_resource_actions(self, resource_name: str) -> List[Any]:
        resource = self.get_resource_by_name(resource_name)
        return self._actions_for(resource)

    def get_resource_action_template(self, resource_id: str, action_id: str) -> Any:
        return self._get(
            f"{self._requests_url(resource_id, action_id)}/template",
            context="get_resource_action_template",
        )

    def resolve_action(self, options: ActionOptions) -> ResolvedAction:
        """Resolve a resource name and action name to the records vRA knows them by.

        Each step runs only once the previous one succeeded, so an unknown
        resource never triggers the action listing.

        The action list is fetched with the same request
        :meth:`get_resource_actions` issues, but not through that method: the
        resource record it resolves along the way is needed for the request
        history URL and is not part of its return value. Patching
        ``get_resource_actions`` therefore does not affect this method.
        """

        opts = ActionRequestOptions.coerce(options)
        resource = self.get_resource_by_name(opts.resource_name)
        actions = self._actions_for(resource)
        try:
            action = actions[find_index_by_key(actions, opts.action_name, "name")]
        except KeyLookupError:
            raise NotFoundError(opts.action_name, field="name", kind="action") from None
        return ResolvedAction(resource=resource, action=action)

    def get_resource_action_requests(self, options: ActionOptions) -> List[Any]:
        resolved = self.resolve_action(options)
        body = self._get(
            self._requests_url(resolved.resource_id, resolved.action_id),
            context="get_resource_action_requests",
        )
        return collection_content(body)

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------
    def submit_resource_action(self, resource_id: str, action_id: str, template: Any) -> Any:
        response: GatewayResponse = self.gateway.post(self._requests_url(resource_id, action_id), json=template)
        body = classify_response(response, context="submit_resource_action", success_statuses=(200, 201))
        return {} if body is None else body

    def request_resource_action(self, options: ActionOptions, data: Optional[Mapping[str, Any]] = None) -> Any:
        resolved = self.resolve_action(options)
        template = self.get_resource_action_template(resolved.resource_id, resolved.action_id)
        payload = fill_template_data(template, data)
        return self.submit_resource_action(resolved.resource_id, resolved.action_id, payload)
