"""Swagger document generator — walks the route table and builds the document."""

import logging
from collections.abc import Iterable

from route_swagger.config import AUTH_FLOWS, SwaggerConfig
from route_swagger.docblock import DocBlock, DocBlockParser
from route_swagger.errors import InvalidAuthFlowError
from route_swagger.host import RouteTable
from route_swagger.models import ApiDocument, Info, Operation, Parameter
from route_swagger.parameters.base import ParameterGenerator
from route_swagger.parameters.body import BodyParameterGenerator
from route_swagger.parameters.path import PathParameterGenerator
from route_swagger.parameters.query import QueryParameterGenerator
from route_swagger.routing.middleware import Middleware
from route_swagger.routing.route import Route
from route_swagger.rules import RuleExtractor, RuleSet

logger = logging.getLogger(__name__)

BODY_METHODS = ("post", "put", "patch")


def _target_name(target) -> str:
    if isinstance(target, str):
        return target
    return f"{target.__module__}.{target.__qualname__}"


class Generator:
    """Builds a Swagger 2.0 document from a host application's routes.

    The instance only holds configuration; each ``generate()`` call works
    on its own document, so repeated calls give identical output.
    """

    def __init__(
        self,
        config: SwaggerConfig,
        table: RouteTable,
        route_filter: str | None = None,
        *,
        extractor: RuleExtractor | None = None,
        doc_parser: DocBlockParser | None = None,
        scope_middleware: Iterable[str] | None = None,
    ):
        self.config = config
        self.table = table
        self.route_filter = route_filter
        self.extractor = extractor or RuleExtractor()
        self.doc_parser = doc_parser or DocBlockParser()
        if scope_middleware is None:
            scope_middleware = config.scope_middleware
        self.scope_middleware = frozenset(_target_name(t) for t in scope_middleware)

    def generate(self) -> ApiDocument:
        docs = self._base_info()

        has_security = False
        if self.config.parse_security:
            docs.security_definitions = self.generate_security_definitions()
            has_security = True

        ignored = {m.lower() for m in self.config.ignored_methods}

        for route in self._app_routes():
            if self.route_filter and not route.uri().startswith(self.route_filter):
                logger.debug("Skipping %s: outside filter %s", route.uri(), self.route_filter)
                continue

            for method in route.methods():
                if method in ignored:
                    continue
                operation = self._generate_operation(route, method, has_security)
                docs.paths.setdefault(route.uri(), {})[method] = operation

        return docs

    def generate_security_definitions(self) -> dict[str, dict]:
        self._validate_auth_flow(self.config.auth_flow)

        definition: dict = {
            "type": "apiKey",
            "name": "Authorization",
            "in": "header",
        }
        scopes = self.oauth_scopes()
        if scopes:
            definition["scopes"] = scopes

        return {self.config.security_scheme_name: definition}

    def oauth_scopes(self) -> dict[str, str]:
        """Scope name -> description for the security definition.

        No auth backend is queried; override to expose real scopes.
        """
        return {}

    def _base_info(self) -> ApiDocument:
        config = self.config
        return ApiDocument(
            info=Info(
                title=config.title,
                description=config.description,
                version=config.app_version,
            ),
            host=config.host,
            base_path=config.base_path,
            schemes=config.schemes or None,
            consumes=config.consumes or None,
            produces=config.produces or None,
            paths={},
        )

    def _app_routes(self) -> list[Route]:
        return [Route(record) for record in self.table.routes]

    def _generate_operation(self, route: Route, method: str, has_security: bool) -> Operation:
        action = route.action()
        logger.debug("Documenting %s %s -> %s (group %r)", method.upper(), route.uri(), action, route.group())

        doc_block = self._parse_doc_block(self.extractor.doc_comment(action), action)
        operation = Operation(
            summary=doc_block.summary,
            description=doc_block.description,
            deprecated=doc_block.deprecated,
        )

        parameters = self._action_parameters(route, method, self.extractor.extract(action))
        if parameters:
            operation.parameters = parameters

        if has_security:
            security = [
                {self.config.security_scheme_name: []}
                for middleware in route.middleware()
                if self._is_scope_middleware(middleware)
            ]
            if security:
                operation.security = security

        return operation

    def _action_parameters(self, route: Route, method: str, rules: RuleSet) -> list[Parameter]:
        parameters = PathParameterGenerator(route.original_uri(), rules).get_parameters()
        if rules:
            parameters += self._parameter_generator(method, rules).get_parameters()
        return parameters

    def _parameter_generator(self, method: str, rules: RuleSet) -> ParameterGenerator:
        if method in BODY_METHODS:
            return BodyParameterGenerator(rules)
        return QueryParameterGenerator(rules)

    def _parse_doc_block(self, docstring: str, action: str) -> DocBlock:
        if not docstring or not self.config.parse_doc_block:
            return DocBlock()

        result = self.doc_parser.try_parse(docstring)
        if not result.ok:
            logger.warning("Could not parse docstring of %s: %s", action, result.error)
            return DocBlock()
        return result.doc_block

    def _is_scope_middleware(self, middleware: Middleware) -> bool:
        target = self.table.middleware_aliases.get(middleware.name())
        if target is None:
            return False
        name = _target_name(target)
        return name in self.scope_middleware or name.rpartition(".")[2] in self.scope_middleware

    @staticmethod
    def _validate_auth_flow(flow: str) -> None:
        if flow not in AUTH_FLOWS:
            raise InvalidAuthFlowError(
                f"Invalid OAuth flow '{flow}', expected one of: {', '.join(AUTH_FLOWS)}"
            )
