from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

DOCS_DIR = Path(__file__).parent.absolute()


@dataclass(frozen=True)
class ResourceSpec:
    uri: str
    description: str
    filename: str

    @property
    def path(self) -> Path:
        return DOCS_DIR / self.filename

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8") if self.path.exists() else ""


RESOURCE_CATALOG: Tuple[ResourceSpec, ...] = (
    ResourceSpec(
        uri="vra-doc://catalog-api",
        description="Endpoints and payload shapes of the vRA catalog-service consumer API.",
        filename="catalog_api.md",
    ),
)


__all__ = ["DOCS_DIR", "ResourceSpec", "RESOURCE_CATALOG"]
