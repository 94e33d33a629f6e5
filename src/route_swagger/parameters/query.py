"""Query string parameters for read-style verbs."""

from route_swagger.models import Parameter
from route_swagger.parameters.base import (
    ParameterGenerator,
    enum_values,
    is_required,
    param_type,
)


class QueryParameterGenerator(ParameterGenerator):
    location = "query"

    def get_parameters(self) -> list[Parameter]:
        params: dict[str, Parameter] = {}
        array_types: dict[str, str] = {}

        for field, rules in self.rules.items():
            type_ = param_type(rules)

            # tags.* describes the elements of the tags array
            if "*" in field:
                array_types[field.split(".*")[0]] = type_
                continue

            param = Parameter(
                location=self.location,
                name=field,
                param_type=type_,
                required=is_required(rules),
                description="",
            )
            enums = enum_values(rules)
            if enums:
                param.enum = enums
            if type_ == "array":
                param.items = {"type": "string"}
            params[field] = param

        for key, type_ in array_types.items():
            if key in params:
                params[key].param_type = "array"
                params[key].items = {"type": type_}
            else:
                params[key] = Parameter(
                    location=self.location,
                    name=key,
                    param_type="array",
                    required=False,
                    description="",
                    items={"type": type_},
                )

        return list(params.values())
