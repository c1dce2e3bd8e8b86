from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass
class PromptDefinition:
    name: str
    description: str
    text: str

    def as_metadata(self) -> Dict[str, str]:
        return {"name": self.name, "description": self.description}


class PromptRegistry:
    def __init__(self) -> None:
        self._prompts: Dict[str, PromptDefinition] = {}
        self._register(
            PromptDefinition(
                name="inspect-resource",
                description="Look up a catalog resource and list what can be done with it.",
                text=(
                    "1. Call `vra_get_resource_by_name` with the resource name to confirm it exists and note its id.\n"
                    "2. Call `vra_list_resource_actions` with the same name to see the available actions.\n"
                    "3. Use `vra_list_action_requests` to review earlier requests for an action before running it again."
                ),
            )
        )
        self._register(
            PromptDefinition(
                name="run-resource-action",
                description="Submit an action (for example Destroy) against a catalog resource.",
                text=(
                    "1. Find the action name with `vra_list_resource_actions`.\n"
                    "2. Fetch the request template with `vra_get_action_template` using the resource id and action id, "
                    "and decide which `data` fields need values.\n"
                    "3. Call `vra_request_action` with the resource name, action name, and the `data` fields.\n"
                    "4. Track progress with `vra_list_action_requests`; the `phase` field moves to SUCCESSFUL or REJECTED."
                ),
            )
        )
        self._register(
            PromptDefinition(
                name="audit-catalog",
                description="Summarize the resources visible to the current user.",
                text=(
                    "1. Call `vra_list_resources` (raise `limit` if the tenant holds more than 1000 resources).\n"
                    "2. Group the results by `typeRef` and `status`.\n"
                    "3. Flag resources whose status is not ACTIVE and inspect them with `vra_get_resource_by_id`."
                ),
            )
        )

    def _register(self, definition: PromptDefinition) -> None:
        self._prompts[definition.name] = definition

    def list_prompts(self) -> List[Dict[str, str]]:
        return [definition.as_metadata() for definition in self._prompts.values()]

    def get_prompt(self, name: str) -> PromptDefinition:
        if name not in self._prompts:
            raise KeyError(name)
        return self._prompts[name]
