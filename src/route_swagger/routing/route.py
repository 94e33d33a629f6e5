"""Adapter normalising a host RouteRecord for document generation."""

import inspect

from route_swagger.host import RouteRecord
from route_swagger.routing.middleware import Middleware

CLOSURE = "Closure"


def strip_optional_char(uri: str) -> str:
    """Drop optional-segment markers: ``/users/{id?}`` -> ``/users/{id}``."""
    return uri.replace("?", "")


class Route:
    """Wraps one RouteRecord. Middleware is parsed once, on construction."""

    def __init__(self, route: RouteRecord):
        self._route = route
        self._middleware = self._format_middleware()

    def original_uri(self) -> str:
        uri = self._route.uri
        if not uri.startswith("/"):
            uri = "/" + uri
        return uri

    def uri(self) -> str:
        return strip_optional_char(self.original_uri())

    def group(self) -> str:
        return self._route.action.get("prefix") or ""

    def middleware(self) -> list[Middleware]:
        return list(self._middleware)

    def action(self) -> str:
        """Fully-qualified handler id.

        ``package.module.Class@method`` for methods, ``package.module@function``
        for module-level functions, ``Closure`` for anything else.
        """
        uses = self._route.action.get("uses")
        if isinstance(uses, str):
            return uses
        if inspect.ismethod(uses):
            uses = uses.__func__
        if not inspect.isfunction(uses):
            return CLOSURE

        qualname = uses.__qualname__
        if "<" in qualname:
            # lambdas, nested functions
            return CLOSURE
        if "." not in qualname:
            return f"{uses.__module__}@{qualname}"
        class_name, _, method = qualname.rpartition(".")
        return f"{uses.__module__}.{class_name}@{method}"

    def methods(self) -> list[str]:
        return [m.lower() for m in self._route.methods]

    def _format_middleware(self) -> list[Middleware]:
        middleware = self._route.action.get("middleware") or []
        if not isinstance(middleware, (list, tuple)):
            middleware = [middleware]
        return [Middleware(m) for m in middleware]
