"""Swagger 2.0 document models produced by the generator."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Parameter(BaseModel):
    """A single operation parameter (path, query or body)."""

    model_config = ConfigDict(populate_by_name=True)

    location: str = Field(alias="in")  # path / query / body
    name: str
    param_type: str | None = Field(None, alias="type")  # unset for body
    required: bool
    description: str = ""
    enum: list[str] | None = None
    items: dict | None = None
    body_schema: dict | None = Field(None, alias="schema")


class Operation(BaseModel):
    """One (path, verb) entry of the document."""

    summary: str = ""
    description: str = ""
    deprecated: bool = False
    parameters: list[Parameter] | None = None
    responses: dict[str, dict] = {"200": {"description": "OK"}}
    security: list[dict[str, list[str]]] | None = None


class Info(BaseModel):
    title: str
    description: str
    version: str


class ApiDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    swagger: str = "2.0"
    info: Info
    host: str
    base_path: str = Field(alias="basePath")
    schemes: list[str] | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    security_definitions: dict[str, dict] | None = Field(None, alias="securityDefinitions")
    paths: dict[str, dict[str, Operation]] = {}

    def to_dict(self) -> dict[str, Any]:
        """Plain Swagger tree; optional keys that were never set are left out."""
        return self.model_dump(by_alias=True, exclude_none=True)
