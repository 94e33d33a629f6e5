from route_swagger.host import RouteRecord
from route_swagger.routing.middleware import Middleware
from route_swagger.routing.route import Route, strip_optional_char
from route_stubs.controllers import RandomMiddleware, UserController, list_posts


def _route(uri="users", methods=None, **action) -> Route:
    return Route(RouteRecord(uri=uri, methods=methods or ["GET"], action=action))


class TestMiddleware:
    def test_name_only(self):
        m = Middleware("auth")
        assert m.name() == "auth"
        assert m.parameters() == []

    def test_name_with_parameters(self):
        m = Middleware("scopes:user-write,user-read")
        assert m.name() == "scopes"
        assert m.parameters() == ["user-write", "user-read"]

    def test_class_middleware_uses_dotted_path(self):
        m = Middleware(RandomMiddleware)
        assert m.name() == "route_stubs.controllers.RandomMiddleware"


class TestRouteUri:
    def test_leading_slash_added(self):
        assert _route("users/{id}").original_uri() == "/users/{id}"

    def test_leading_slash_kept(self):
        assert _route("/users").original_uri() == "/users"

    def test_optional_marker_stripped_from_uri(self):
        route = _route("posts/{post}/comments/{comment?}")
        assert route.original_uri() == "/posts/{post}/comments/{comment?}"
        assert route.uri() == "/posts/{post}/comments/{comment}"

    def test_strip_optional_char(self):
        assert strip_optional_char("/a/{b?}/{c?}") == "/a/{b}/{c}"


class TestRouteMethods:
    def test_methods_lower_cased_in_order(self):
        assert _route(methods=["GET", "HEAD"]).methods() == ["get", "head"]


class TestRouteAction:
    def test_string_action(self):
        assert _route(uses="app.UserController@index").action() == "app.UserController@index"

    def test_missing_action_is_closure(self):
        assert _route().action() == "Closure"

    def test_lambda_is_closure(self):
        assert _route(uses=lambda: "pong").action() == "Closure"

    def test_class_function_is_qualified(self):
        action = _route(uses=UserController.index).action()
        assert action == "route_stubs.controllers.UserController@index"

    def test_bound_method_is_qualified(self):
        action = _route(uses=UserController().show).action()
        assert action == "route_stubs.controllers.UserController@show"

    def test_module_function_is_qualified(self):
        action = _route(uses=list_posts).action()
        assert action == "route_stubs.controllers@list_posts"

    def test_nested_function_is_closure(self):
        def handler():
            pass

        assert _route(uses=handler).action() == "Closure"


class TestRouteMiddleware:
    def test_no_middleware_key(self):
        assert _route().middleware() == []

    def test_single_string_is_wrapped(self):
        middleware = _route(middleware="scope:user-read").middleware()
        assert len(middleware) == 1
        assert middleware[0].name() == "scope"
        assert middleware[0].parameters() == ["user-read"]

    def test_list_is_expanded_in_order(self):
        middleware = _route(middleware=["web", "scopes:a,b"]).middleware()
        assert [m.name() for m in middleware] == ["web", "scopes"]

    def test_group_prefix(self):
        assert _route(prefix="users").group() == "users"
        assert _route().group() == ""
