from __future__ import annotations

from pydantic import BaseModel


class CatalogAttributeResponse(BaseModel):
    code: str
    name: str


class CatalogPositionResponse(BaseModel):
    position: str
    attributes: list[CatalogAttributeResponse]
