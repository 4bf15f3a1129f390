from __future__ import annotations

import logging

from flutter_scaffold.config import ProjectSpec
from flutter_scaffold.features import expand_feature_entry
from flutter_scaffold.router import (
    AUTH_PATHS,
    ImportEntry,
    RouteEntry,
    apply_default_home,
    collect_routes,
    synthesize_router,
)

PROVIDER_IMPORT = "import 'package:demo/core/services/auth_service_provider.dart';"


def make_spec(*features: str, state: bool = True, backend: bool = False) -> ProjectSpec:
    return ProjectSpec.from_answers(
        "demo",
        "com.x.demo",
        features=features,
        use_state_mgmt=state,
        use_backend=backend,
    )


def test_placeholder_without_state_management():
    router = synthesize_router(make_spec("home", "login", state=False))
    assert router.splitlines() == [
        "import 'package:go_router/go_router.dart';",
        "",
        "// TODO: Implement router",
    ]


def test_no_features_gets_default_home_route():
    router = synthesize_router(make_spec())
    assert router.count("path: '/',") == 1
    assert "name: 'home'," in router
    assert "const HomeScreen()" in router
    assert "import 'package:demo/features/home/presentation/home_screen.dart';" in router
    assert "redirect" not in router


def test_imports_are_grouped_before_provider():
    router = synthesize_router(make_spec("home"))
    head, _, _ = router.partition("final goRouterProvider")
    lines = [line for line in head.splitlines() if line]
    assert lines[:2] == [
        "import 'package:go_router/go_router.dart';",
        "import 'package:hooks_riverpod/hooks_riverpod.dart';",
    ]
    assert all(line.startswith("import 'package:") for line in lines)


def test_home_and_profile_routes_in_order():
    router = synthesize_router(make_spec("home", "profile"))
    assert router.index("path: '/',") < router.index("path: '/profile',")
    assert "import 'package:demo/features/home/presentation/home_screen.dart';" in router
    assert "import 'package:demo/features/profile/presentation/profile_screen.dart';" in router
    assert "redirect" not in router
    assert "authServiceProvider" not in router
    assert "path: '/auth'" not in router


def test_default_home_is_prepended_and_imported_last():
    model = apply_default_home(collect_routes(make_spec("settings")))
    assert [route.path for route in model.routes] == ["/", "/settings"]
    assert model.imports[-1] == ImportEntry("package:demo/features/home/presentation/home_screen.dart")


def test_repeated_home_keeps_a_single_root_route():
    router = synthesize_router(make_spec("home", "home"))
    assert router.count("path: '/',") == 1
    assert router.count("home_screen.dart") == 1


def test_unknown_features_contribute_nothing():
    model = collect_routes(make_spec("cart", "checkout"))
    assert model.routes == []
    assert model.auth_routes == []
    assert not model.has_auth
    assert [entry.uri for entry in model.imports] == [
        "package:go_router/go_router.dart",
        "package:hooks_riverpod/hooks_riverpod.dart",
    ]


def test_expanded_auth_builds_auth_group():
    features = [feature.name for feature in expand_feature_entry("auth")]
    router = synthesize_router(make_spec(*features, backend=True))

    assert router.count("path: '/',") == 1
    assert router.index("path: '/',") < router.index("path: '/auth',")
    group = router[router.index("path: '/auth',"):]
    assert group.index("path: 'login',") < group.index("path: 'register',") < group.index("path: 'forgot-password',")
    assert "name: 'forgotPassword'," in group
    assert router.count("GoRoute(") == 5
    assert "final authService = ref.read(authServiceProvider);" in router
    assert "redirect: (context, state) {" in router
    assert router.count(PROVIDER_IMPORT) == 1
    assert "import 'package:demo/features/forgot_password/presentation/forgot_password_screen.dart';" in router


def test_redirect_block_rules():
    router = synthesize_router(make_spec("login"))
    for path in AUTH_PATHS:
        assert f"'{path}'" in router
    assert "if (!isLoggedIn && !authPaths.contains(location)) {\n        return '/auth/login';" in router
    assert "if (isLoggedIn && authPaths.contains(location)) {\n        return '/';" in router
    assert "return null;" in router
    assert router.count("ref.read(authServiceProvider)") == 1


def test_login_alone_enables_auth_without_backend(caplog):
    with caplog.at_level(logging.WARNING, logger="flutter_scaffold.router"):
        router = synthesize_router(make_spec("login", backend=False))
    assert PROVIDER_IMPORT in router
    assert "path: '/auth'," in router
    assert "path: 'login'," in router
    assert "redirect:" in router
    assert "auth_service_provider.dart" in caplog.text


def test_literal_auth_feature_routes_login_and_forgot_password():
    model = collect_routes(make_spec("auth", "login"))
    assert model.has_auth
    assert [route.path for route in model.auth_routes] == ["login", "forgot-password"]


def test_forgot_password_alone_does_not_enable_auth(caplog):
    with caplog.at_level(logging.WARNING, logger="flutter_scaffold.router"):
        model = collect_routes(make_spec("forgot_password"))
    assert not model.has_auth
    assert model.auth_routes == []
    assert caplog.text == ""

    router = synthesize_router(make_spec("forgot_password"))
    assert "redirect" not in router
    assert "path: '/auth'" not in router
    assert "forgot-password" not in router
    assert "auth_service_provider.dart" not in router
    assert "forgot_password_screen.dart" not in router


def test_forgot_password_joins_auth_group_opened_later():
    model = collect_routes(make_spec("forgot_password", "login"))
    assert model.has_auth
    assert [route.path for route in model.auth_routes] == ["login", "forgot-password"]
    assert ImportEntry("package:demo/features/forgot_password/presentation/forgot_password_screen.dart") in model.imports


def test_register_route():
    model = collect_routes(make_spec("register"))
    assert model.auth_routes == [RouteEntry("register", "register", "RegisterScreen")]


def test_project_name_is_used_verbatim():
    spec = ProjectSpec.from_answers("My_App", features=["profile"])
    router = synthesize_router(spec)
    assert "import 'package:My_App/features/profile/presentation/profile_screen.dart';" in router


def test_synthesis_is_deterministic():
    spec = make_spec("home", "login", "register", "settings", backend=True)
    assert synthesize_router(spec) == synthesize_router(spec)


def test_route_entry_render():
    rendered = RouteEntry("/settings", "settings", "SettingsScreen").render(indent=2)
    assert rendered.splitlines() == [
        "  GoRoute(",
        "    path: '/settings',",
        "    name: 'settings',",
        "    builder: (context, state) => const SettingsScreen(),",
        "  ),",
    ]
