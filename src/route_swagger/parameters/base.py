"""Rule-token helpers shared by the parameter generators."""

from route_swagger.models import Parameter
from route_swagger.rules import RuleSet, split_rules

TYPE_TOKENS = {
    "integer": "integer",
    "numeric": "number",
    "boolean": "boolean",
    "array": "array",
    "string": "string",
}


def is_required(rules: list[str]) -> bool:
    return "required" in rules


def param_type(rules: list[str]) -> str:
    """First type-bearing token wins; fields without one are strings."""
    for rule in rules:
        if rule in TYPE_TOKENS:
            return TYPE_TOKENS[rule]
    return "string"


def enum_values(rules: list[str]) -> list[str]:
    """Allowed values from an ``in:a,b,c`` token."""
    for rule in rules:
        if rule.startswith("in:"):
            values = rule[len("in:"):].replace('"', "")
            return [v for v in values.split(",") if v]
    return []


class ParameterGenerator:
    """Turns a rule set into Swagger parameters."""

    location = ""

    def __init__(self, rules: RuleSet):
        self.rules = {field: split_rules(value) for field, value in rules.items()}

    def get_parameters(self) -> list[Parameter]:
        raise NotImplementedError
