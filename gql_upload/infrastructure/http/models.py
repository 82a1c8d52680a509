from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class GraphQLErrorModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str
    locations: list[dict[str, int]] | None = None
    path: list[str | int] | None = None
    extensions: dict[str, Any] | None = None


class GraphQLResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: dict[str, Any] | None = None
    errors: list[GraphQLErrorModel] | None = None
    extensions: dict[str, Any] | None = None

    def to_result(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=False)

