"""Tests for RouteGuardUtils and host-router integration."""

import pytest

from routeguard.application import GuardedRoute, RouteGuardUtils, UnguardedRoute
from routeguard.domain.models import NavigationState
from routeguard.guards import RouteGuard, allow, any_of, redirect_if, redirect_to
from routeguard.infrastructure import InMemoryRouter


class Session:
    """Test stand-in for authentication state."""

    def __init__(self, authenticated: bool = False):
        self.authenticated = authenticated


class AuthGuard(RouteGuard):
    """Test guard: requires an authenticated session."""

    def __init__(self, session: Session):
        self.session = session

    async def on_navigation(self, resolver, context, state):
        if self.session.authenticated:
            resolver.next()
        else:
            resolver.redirect("/login")


class BlockGuard(RouteGuard):
    """Test guard that always blocks."""

    def on_navigation(self, resolver, context, state):
        resolver.block()


class ExplodingGuard(RouteGuard):
    """Test guard that raises during evaluation."""

    async def on_navigation(self, resolver, context, state):
        raise RuntimeError("boom")


class ProfileRoute(GuardedRoute):
    path = "/profile"

    @property
    def guards(self):
        return redirect_to("/onboarding")


class LoginRoute(UnguardedRoute):
    path = "/login"


class TestExecuteGuard:
    """Tests for RouteGuardUtils.execute_guard."""

    @pytest.mark.asyncio
    async def test_allow_maps_to_none(self, router, admin_state):
        assert await RouteGuardUtils.execute_guard(allow(), router, admin_state) is None

    @pytest.mark.asyncio
    async def test_redirect_maps_to_path(self, router, admin_state):
        result = await RouteGuardUtils.execute_guard(
            redirect_to("/login"), router, admin_state
        )
        assert result == "/login"

    @pytest.mark.asyncio
    async def test_errors_propagate(self, router, admin_state):
        with pytest.raises(RuntimeError, match="boom"):
            await RouteGuardUtils.execute_guard(ExplodingGuard(), router, admin_state)


class TestCreateGuardRedirect:
    """Tests for RouteGuardUtils.create_guard_redirect."""

    @pytest.mark.asyncio
    async def test_callback_runs_expression(self, router, admin_state):
        redirect = RouteGuardUtils.create_guard_redirect(
            any_of([redirect_to("/a"), allow()])
        )
        assert await redirect(router, admin_state) is None

    @pytest.mark.asyncio
    async def test_callback_uses_config(self, router, admin_state, fallback_config):
        guard = redirect_if(lambda context, state: False, "/x") & BlockGuard()
        redirect = RouteGuardUtils.create_guard_redirect(guard, fallback_config)
        assert await redirect(router, admin_state) == "/unauthorized"

    @pytest.mark.asyncio
    async def test_callback_is_reusable(self, router):
        session = Session()
        redirect = RouteGuardUtils.create_guard_redirect(AuthGuard(session))
        state = NavigationState(location="/admin")
        assert await redirect(router, state) == "/login"
        session.authenticated = True
        assert await redirect(router, state) is None


class TestCreateRouterRedirect:
    """Tests for the router-level redirect callback."""

    @pytest.mark.asyncio
    async def test_router_guard_applies_to_plain_routes(self, router):
        redirect = RouteGuardUtils.create_router_redirect(AuthGuard(Session()))
        state = NavigationState(location="/settings", route=object())
        assert await redirect(router, state) == "/login"

    @pytest.mark.asyncio
    async def test_guarded_route_uses_own_guards(self, router):
        redirect = RouteGuardUtils.create_router_redirect(AuthGuard(Session()))
        state = NavigationState(location="/profile", route=ProfileRoute())
        assert await redirect(router, state) == "/onboarding"

    @pytest.mark.asyncio
    async def test_unguarded_route_bypasses_router_guard(self, router):
        redirect = RouteGuardUtils.create_router_redirect(AuthGuard(Session()))
        state = NavigationState(location="/login", route=LoginRoute())
        assert await redirect(router, state) is None

    @pytest.mark.asyncio
    async def test_no_router_guard_allows(self, router):
        redirect = RouteGuardUtils.create_router_redirect()
        assert await redirect(router, NavigationState(location="/x")) is None


class TestRouterIntegration:
    """End-to-end navigation through the in-memory router."""

    @pytest.mark.asyncio
    async def test_unauthenticated_navigation_lands_on_login(self):
        router = InMemoryRouter(
            initial_location="/",
            routes={"/login": LoginRoute(), "/profile": ProfileRoute()},
        )
        redirect = RouteGuardUtils.create_router_redirect(AuthGuard(Session()))

        assert await router.go("/admin", redirect) == "/login"
        assert router.get_current_location() == "/login"
        assert router.history == ["/", "/login"]

    @pytest.mark.asyncio
    async def test_authenticated_navigation_renders_target(self):
        router = InMemoryRouter(initial_location="/")
        redirect = RouteGuardUtils.create_router_redirect(AuthGuard(Session(True)))
        assert await router.go("/admin", redirect) == "/admin"
