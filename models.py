from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union


@dataclass(frozen=True)
class CatalogResource:
    """Simplified view of a catalog resource record."""

    name: str
    status: str
    id: str
    type_ref: str

    def as_dict(self) -> Dict[str, str]:
        return {"name": self.name, "status": self.status, "id": self.id, "typeRef": self.type_ref}


def map_resource(record: Mapping[str, Any]) -> CatalogResource:
    return CatalogResource(
        name=record["name"],
        status=record["status"],
        id=record["id"],
        type_ref=record["resourceTypeRef"]["label"],
    )


@dataclass(frozen=True)
class ActionRequestOptions:
    resource_name: str
    action_name: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ActionRequestOptions":
        resource_name = data.get("resourceName", data.get("resource_name"))
        action_name = data.get("actionName", data.get("action_name"))
        if resource_name is None or action_name is None:
            raise ValueError("action options need resourceName and actionName")
        return cls(resource_name=resource_name, action_name=action_name)

    @classmethod
    def coerce(cls, value: Union["ActionRequestOptions", Mapping[str, Any]]) -> "ActionRequestOptions":
        if isinstance(value, cls):
            return value
        return cls.from_mapping(value)


@dataclass(frozen=True)
class ResolvedAction:
    """A resource record and one of its action records, both as returned by vRA."""

    resource: Dict[str, Any]
    action: Dict[str, Any]

    @property
    def resource_id(self) -> str:
        return self.resource["id"]

    @property
    def action_id(self) -> str:
        return self.action["id"]
