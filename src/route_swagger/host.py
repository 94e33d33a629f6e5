"""Read-only view of the host application's routing state.

A framework integration fills these models from its router; the generator
never talks to the framework directly.
"""

import importlib
import os
import sys
from typing import Any

from pydantic import BaseModel

from route_swagger.errors import ConfigError


class RouteRecord(BaseModel):
    """One registered route as the host router sees it."""

    uri: str  # users/{id?}
    methods: list[str]  # GET / HEAD / POST ...
    action: dict[str, Any] = {}  # uses, middleware, prefix


class RouteTable(BaseModel):
    """All routes of an application plus its middleware alias map."""

    routes: list[RouteRecord] = []
    middleware_aliases: dict[str, Any] = {}  # alias -> class or dotted path


def load_route_table(target: str) -> RouteTable:
    """Import a RouteTable from a ``module:attribute`` reference.

    The attribute may be the table itself or a callable returning one.
    The current directory is importable, as when running a script from it.
    """
    module_name, _, attr = target.partition(":")
    if not module_name or not attr:
        raise ConfigError(f"Expected 'module:attribute', got '{target}'")

    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import '{module_name}': {e}") from e

    try:
        table = getattr(module, attr)
    except AttributeError as e:
        raise ConfigError(f"'{module_name}' has no attribute '{attr}'") from e

    if callable(table) and not isinstance(table, RouteTable):
        table = table()
    if not isinstance(table, RouteTable):
        raise ConfigError(f"'{target}' is not a RouteTable")
    return table
