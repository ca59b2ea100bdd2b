"""Tests for InMemoryRouter."""

import pytest

from routeguard.infrastructure.router.memory import InMemoryRouter


class TestInMemoryRouter:
    """Tests for the in-memory host router."""

    def test_initial_state(self):
        router = InMemoryRouter(initial_location="/home")
        assert router.get_current_location() == "/home"
        assert router.is_mounted is True
        assert router.history == ["/home"]

    def test_unmount(self, router):
        router.unmount()
        assert router.is_mounted is False

    def test_match_attaches_route(self):
        route = object()
        router = InMemoryRouter(routes={"/admin": route})
        state = router.match("/admin?tab=users")
        assert state.location == "/admin?tab=users"
        assert state.route is route
        assert router.match("/other").route is None

    @pytest.mark.asyncio
    async def test_go_renders_when_allowed(self, router):
        async def allow_all(context, state):
            return None

        assert await router.go("/reports", allow_all) == "/reports"
        assert router.get_current_location() == "/reports"

    @pytest.mark.asyncio
    async def test_go_follows_redirects(self, router):
        hops = {"/a": "/b", "/b": "/c"}

        async def redirect(context, state):
            return hops.get(state.path)

        assert await router.go("/a", redirect) == "/c"
        assert router.history == ["/dashboard", "/c"]

    @pytest.mark.asyncio
    async def test_redirect_to_self_renders(self, router):
        async def redirect(context, state):
            return state.location

        assert await router.go("/same", redirect) == "/same"

    @pytest.mark.asyncio
    async def test_redirect_loop_raises(self):
        router = InMemoryRouter(max_redirects=3)

        async def ping_pong(context, state):
            return "/pong" if state.path == "/ping" else "/ping"

        with pytest.raises(RuntimeError, match="Too many redirects"):
            await router.go("/ping", ping_pong)
        assert router.get_current_location() == "/"
