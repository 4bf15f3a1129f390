"""Synthesis of ``lib/app/router.dart`` from the declared features.

The router is assembled as a :class:`RouterModel` (imports plus top-level and
nested auth routes) in a single pass over the features and rendered to Dart in
one final step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import ProjectSpec
from .features import AUTH_TOKEN
from .naming import camel_case, pascal_case
from .templates import PLACEHOLDER_ROUTER_SOURCE

__all__ = [
    "AUTH_PATHS",
    "ImportEntry",
    "RouteEntry",
    "RouterModel",
    "apply_default_home",
    "collect_routes",
    "render_router",
    "synthesize_router",
]


LOGGER = logging.getLogger(__name__)

GO_ROUTER_IMPORT = "package:go_router/go_router.dart"
HOOKS_RIVERPOD_IMPORT = "package:hooks_riverpod/hooks_riverpod.dart"
AUTH_SERVICE_PROVIDER_PATH = "core/services/auth_service_provider.dart"

AUTH_ROOT = "/auth"
AUTH_PATHS = ("/auth", "/auth/login", "/auth/register", "/auth/forgot-password")
LOGIN_LOCATION = "/auth/login"


@dataclass(frozen=True, slots=True)
class ImportEntry:
    """A Dart ``import`` directive."""

    uri: str

    def render(self) -> str:
        return f"import '{self.uri}';"


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A ``GoRoute`` pointing at a feature screen."""

    path: str
    name: str
    screen: str

    def render(self, indent: int = 0) -> str:
        pad = " " * indent
        return (
            f"{pad}GoRoute(\n"
            f"{pad}  path: '{self.path}',\n"
            f"{pad}  name: '{self.name}',\n"
            f"{pad}  builder: (context, state) => const {self.screen}(),\n"
            f"{pad}),"
        )


@dataclass(frozen=True, slots=True)
class _Target:
    feature: str
    path: str
    nested: bool

    @property
    def route(self) -> RouteEntry:
        # Nested auth paths are relative segments; their names follow the
        # screen feature name ('forgot_password' -> 'forgotPassword').
        return RouteEntry(self.path, camel_case(self.feature), f"{pascal_case(self.feature)}Screen")


_LOGIN = _Target("login", "login", nested=True)
_REGISTER = _Target("register", "register", nested=True)
_FORGOT_PASSWORD = _Target("forgot_password", "forgot-password", nested=True)
_HOME = _Target("home", "/", nested=False)

# Feature name -> (screens it routes to, whether it turns on the auth group).
_WELL_KNOWN: dict[str, tuple[tuple[_Target, ...], bool]] = {
    AUTH_TOKEN: ((_LOGIN, _FORGOT_PASSWORD), True),
    "login": ((_LOGIN,), True),
    "register": ((_REGISTER,), True),
    "home": ((_HOME,), False),
    "profile": ((_Target("profile", "/profile", nested=False),), False),
    "settings": ((_Target("settings", "/settings", nested=False),), False),
}

# Routed only inside an auth group that another feature has turned on.
_AUTH_DEPENDENT: dict[str, tuple[_Target, ...]] = {
    "forgot_password": (_FORGOT_PASSWORD,),
}


@dataclass(slots=True)
class RouterModel:
    """Intermediate representation of the generated router module."""

    project_name: str
    imports: list[ImportEntry] = field(default_factory=list)
    routes: list[RouteEntry] = field(default_factory=list)
    auth_routes: list[RouteEntry] = field(default_factory=list)
    has_auth: bool = False

    def project_import(self, path: str) -> ImportEntry:
        return ImportEntry(f"package:{self.project_name}/{path}")

    def screen_import(self, feature: str) -> ImportEntry:
        return self.project_import(f"features/{feature}/presentation/{feature}_screen.dart")

    def add_import(self, entry: ImportEntry) -> None:
        if entry not in self.imports:
            self.imports.append(entry)

    def add_route(self, route: RouteEntry, *, nested: bool = False) -> None:
        target = self.auth_routes if nested else self.routes
        if any(existing.path == route.path for existing in target):
            return
        target.append(route)

    def has_root_route(self) -> bool:
        return any(route.path == "/" for route in self.routes)


def collect_routes(spec: ProjectSpec) -> RouterModel:
    """Walk ``spec.features`` once and gather imports and routes."""

    model = RouterModel(project_name=spec.project_name)
    model.add_import(ImportEntry(GO_ROUTER_IMPORT))
    model.add_import(ImportEntry(HOOKS_RIVERPOD_IMPORT))

    deferred: list[_Target] = []
    for feature in spec.features:
        deferred.extend(_AUTH_DEPENDENT.get(feature.name, ()))
        known = _WELL_KNOWN.get(feature.name)
        if known is None:
            continue
        targets, auth_related = known
        if auth_related:
            model.has_auth = True
            model.add_import(model.project_import(AUTH_SERVICE_PROVIDER_PATH))
        for target in targets:
            model.add_import(model.screen_import(target.feature))
            model.add_route(target.route, nested=target.nested)

    if model.has_auth:
        for target in deferred:
            model.add_import(model.screen_import(target.feature))
            model.add_route(target.route, nested=target.nested)

    if model.has_auth and not spec.use_backend:
        LOGGER.warning(
            "router imports %s but the backend integration is disabled; the provider is not generated",
            AUTH_SERVICE_PROVIDER_PATH,
        )
    return model


def apply_default_home(model: RouterModel) -> RouterModel:
    """Guarantee a landing route at ``/`` pointing to ``HomeScreen``."""

    if not model.has_root_route():
        model.routes.insert(0, _HOME.route)
        model.add_import(model.screen_import(_HOME.feature))
    return model


def _render_redirect() -> str:
    auth_paths = ", ".join(f"'{path}'" for path in AUTH_PATHS)
    return (
        "    redirect: (context, state) {\n"
        "      final isLoggedIn = authService.isLoggedIn();\n"
        "      final location = state.matchedLocation;\n"
        f"      final authPaths = [{auth_paths}];\n"
        "\n"
        "      if (!isLoggedIn && !authPaths.contains(location)) {\n"
        f"        return '{LOGIN_LOCATION}';\n"
        "      }\n"
        "\n"
        "      if (isLoggedIn && authPaths.contains(location)) {\n"
        "        return '/';\n"
        "      }\n"
        "\n"
        "      return null;\n"
        "    },\n"
    )


def _render_auth_group(auth_routes: list[RouteEntry]) -> str:
    nested = "\n".join(route.render(indent=10) for route in auth_routes)
    return (
        "      GoRoute(\n"
        f"        path: '{AUTH_ROOT}',\n"
        "        name: 'auth',\n"
        f"        builder: (context, state) => const {_LOGIN.route.screen}(),\n"
        "        routes: [\n"
        f"{nested}\n"
        "        ],\n"
        "      ),"
    )


def render_router(model: RouterModel) -> str:
    """Render ``model`` as the Dart source of ``router.dart``."""

    lines = [entry.render() for entry in model.imports]
    lines.append("")
    lines.append("final goRouterProvider = Provider<GoRouter>((ref) {")
    if model.has_auth:
        lines.append("  final authService = ref.read(authServiceProvider);")
        lines.append("")
    lines.append("  return GoRouter(")
    lines.append("    initialLocation: '/',")

    body = "\n".join(lines) + "\n"
    if model.has_auth:
        body += _render_redirect()

    route_blocks = [route.render(indent=6) for route in model.routes]
    if model.has_auth:
        route_blocks.append(_render_auth_group(model.auth_routes))

    body += "    routes: [\n"
    body += "\n".join(route_blocks) + "\n"
    body += "    ],\n"
    body += "  );\n"
    body += "});\n"
    return body


def synthesize_router(spec: ProjectSpec) -> str:
    """Return the contents of ``lib/app/router.dart`` for ``spec``."""

    if not spec.use_state_mgmt:
        return PLACEHOLDER_ROUTER_SOURCE
    model = apply_default_home(collect_routes(spec))
    LOGGER.debug(
        "router: %d routes, %d auth routes, auth redirect %s",
        len(model.routes),
        len(model.auth_routes),
        "on" if model.has_auth else "off",
    )
    return render_router(model)
