"""Middleware reference parsed from a route's middleware declaration."""


class Middleware:
    """A middleware alias plus its arguments, e.g. ``scope:user-read,user-write``."""

    def __init__(self, middleware):
        if not isinstance(middleware, str):
            middleware = f"{middleware.__module__}.{middleware.__qualname__}"

        name, _, parameters = middleware.partition(":")
        self._name = name
        self._parameters = parameters.split(",") if parameters else []

    def name(self) -> str:
        return self._name

    def parameters(self) -> list[str]:
        return list(self._parameters)

    def __repr__(self) -> str:
        return f"Middleware({self._name!r}, {self._parameters!r})"
