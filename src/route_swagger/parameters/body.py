"""Request body schema for mutating verbs.

All fields go into one ``body`` parameter. Dotted names nest:
``address.city`` becomes an object property and ``tags.*`` an array.
"""

from route_swagger.models import Parameter
from route_swagger.parameters.base import (
    ParameterGenerator,
    enum_values,
    is_required,
    param_type,
)


class BodyParameterGenerator(ParameterGenerator):
    location = "body"

    def get_parameters(self) -> list[Parameter]:
        schema: dict = {"type": "object", "properties": {}}

        for field, rules in self.rules.items():
            self._add_to_schema(schema, field.split("."), rules)

        return [
            Parameter(
                location=self.location,
                name="body",
                required=bool(schema.get("required")),
                description="",
                body_schema=schema,
            )
        ]

    def _add_to_schema(self, schema: dict, tokens: list[str], rules: list[str]) -> None:
        name, rest = tokens[0], tokens[1:]

        if name == "*":
            # array element; schema is the array's items
            if rest:
                self._merge_type(schema, "array" if rest[0] == "*" else "object")
                self._descend(schema, rest, rules)
            else:
                schema.update(self._new_property(param_type(rules), rules))
            return

        properties = schema.setdefault("properties", {})
        if rest:
            type_ = "array" if rest[0] == "*" else "object"
        else:
            type_ = param_type(rules)

        if name not in properties:
            properties[name] = self._new_property(type_, rules if not rest else [])
        else:
            self._merge_type(properties[name], type_)

        if not rest and is_required(rules):
            schema.setdefault("required", []).append(name)

        if rest:
            self._descend(properties[name], rest, rules)

    def _descend(self, prop: dict, rest: list[str], rules: list[str]) -> None:
        if prop["type"] == "array":
            self._add_to_schema(prop.setdefault("items", {}), rest, rules)
        else:
            self._add_to_schema(prop, rest, rules)

    @staticmethod
    def _merge_type(prop: dict, type_: str) -> None:
        prop["type"] = type_
        # a scalar (re)declaration drops container keys from earlier dotted fields
        if type_ != "array":
            prop.pop("items", None)
        if type_ != "object":
            prop.pop("properties", None)
            prop.pop("required", None)

        if type_ == "array":
            prop.setdefault("items", {})
        elif type_ == "object":
            prop.setdefault("properties", {})

    @staticmethod
    def _new_property(type_: str, rules: list[str]) -> dict:
        prop: dict = {"type": type_}
        enums = enum_values(rules)
        if enums:
            prop["enum"] = enums
        if type_ == "array":
            prop["items"] = {}
        elif type_ == "object":
            prop["properties"] = {}
        return prop
