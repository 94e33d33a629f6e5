"""Generator configuration.

Keys use the camelCase names of the YAML config file; Python code
reads the snake_case attributes.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from route_swagger.errors import ConfigError

AUTH_FLOWS = ("password", "application", "implicit", "accessCode", "apiKey")


class SwaggerConfig(BaseModel):
    """Everything the generator needs besides the route table."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(default_factory=lambda: os.getenv("APP_NAME", "API"))
    description: str = ""
    app_version: str = Field("1.0.0", alias="appVersion")
    host: str = Field(default_factory=lambda: os.getenv("APP_URL", ""))
    base_path: str = Field("/", alias="basePath")
    schemes: list[str] = []
    consumes: list[str] = []
    produces: list[str] = []
    ignored_methods: list[str] = Field(["head", "options"], alias="ignoredMethods")
    parse_doc_block: bool = Field(True, alias="parseDocBlock")
    parse_security: bool = Field(True, alias="parseSecurity")
    # Checked when security definitions are built, not here.
    auth_flow: str = Field("accessCode", alias="authFlow")
    security_scheme_name: str = Field("jwt", alias="securitySchemeName")
    scope_middleware: list[str] = Field(
        ["CheckScopes", "CheckForAnyScope"], alias="scopeMiddleware"
    )


def load_config(path: Path | None = None) -> SwaggerConfig:
    """Load a SwaggerConfig from a YAML file, or defaults when no path is given."""
    if path is None:
        return SwaggerConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return SwaggerConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")

    try:
        return SwaggerConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
