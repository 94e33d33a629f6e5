"""Path parameters from the route's URI template."""

import re

from route_swagger.models import Parameter
from route_swagger.parameters.base import ParameterGenerator
from route_swagger.rules import RuleSet

PATH_VARIABLE_RE = re.compile(r"{(\w+)\??}")

NARROW_TYPES = {"integer": "integer", "numeric": "number"}


class PathParameterGenerator(ParameterGenerator):
    location = "path"

    def __init__(self, uri: str, rules: RuleSet | None = None):
        super().__init__(rules or {})
        self.uri = uri

    def get_parameters(self) -> list[Parameter]:
        return [
            Parameter(
                location=self.location,
                name=name,
                param_type=self._type_for(name),
                required=True,
                description="",
            )
            for name in PATH_VARIABLE_RE.findall(self.uri)
        ]

    def _type_for(self, name: str) -> str:
        for rule in self.rules.get(name, []):
            if rule in NARROW_TYPES:
                return NARROW_TYPES[rule]
        return "string"
