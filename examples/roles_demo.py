#!/usr/bin/env python3
"""
Role-based routing with composed guards.

Builds a small route table on the in-memory router, attaches guard
expressions, and navigates as different users. No host framework needed.

Run with: python examples/roles_demo.py [-v]
"""

import asyncio
import logging
import sys

from rich.console import Console
from rich.table import Table

from routeguard import (
    ConditionalGuard,
    GuardConfig,
    GuardedRoute,
    InMemoryRouter,
    RouteGuard,
    RouteGuardUtils,
    UnguardedRoute,
    all_of,
    any_of,
    one_of,
)
from routeguard.visualization import print_guard_tree

console = Console()


class User:
    def __init__(self, name: str, roles: set[str], authenticated: bool = True):
        self.name = name
        self.roles = roles
        self.authenticated = authenticated


class AuthGuard(RouteGuard):
    """Requires a signed-in user."""

    def __init__(self, user: User):
        self.user = user

    async def on_navigation(self, resolver, context, state):
        # Stand-in for a session lookup
        await asyncio.sleep(0)
        if self.user.authenticated:
            resolver.next()
        else:
            resolver.redirect("/login")


class RoleGuard(RouteGuard):
    """Requires any of ``roles``; blocks otherwise."""

    def __init__(self, user: User, roles: list[str]):
        self.user = user
        self.roles = roles

    def on_navigation(self, resolver, context, state):
        resolver.next_or_block(bool(self.user.roles & set(self.roles)))

    def __repr__(self) -> str:
        return f"RoleGuard({self.roles})"


class LoginRoute(UnguardedRoute):
    path = "/login"


def build_routes(user: User) -> dict[str, object]:
    class AdminRoute(GuardedRoute):
        path = "/admin"

        @property
        def guards(self):
            return all_of([AuthGuard(user), RoleGuard(user, ["admin"])])

    class ContentRoute(GuardedRoute):
        path = "/content"

        @property
        def guards(self):
            return AuthGuard(user) & (
                RoleGuard(user, ["premium"]) | RoleGuard(user, ["trial"])
            )

    class PlanRoute(GuardedRoute):
        path = "/plan"

        @property
        def guards(self):
            return one_of(
                [RoleGuard(user, ["premium"]), RoleGuard(user, ["trial"])],
                tie_redirect="/billing/conflict",
            )

    return {
        "/login": LoginRoute(),
        "/admin": AdminRoute(),
        "/content": ContentRoute(),
        "/plan": PlanRoute(),
    }


async def main() -> None:
    verbose = "-v" in sys.argv
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)-8s | %(name)s | %(message)s",
    )

    users = [
        User("anonymous", set(), authenticated=False),
        User("alice", {"admin"}),
        User("bob", {"premium"}),
        User("carol", {"premium", "trial"}),
    ]
    targets = ["/admin", "/content", "/plan", "/about"]
    config = GuardConfig(fallback_path="/unauthorized")

    table = Table(title="Where each user lands")
    table.add_column("User", style="bold")
    for target in targets:
        table.add_column(target)

    for user in users:
        router = InMemoryRouter(initial_location="/", routes=build_routes(user))
        router_guard = ConditionalGuard.excluding(AuthGuard(user), ["/about"])
        redirect = RouteGuardUtils.create_router_redirect(router_guard, config)
        landed = [await router.go(target, redirect) for target in targets]
        table.add_row(user.name, *landed)

    console.print(table)

    sample = build_routes(User("sample", set()))
    print_guard_tree(sample["/content"].guards, title="/content", console=console)
    print_guard_tree(
        any_of([RoleGuard(User("x", set()), ["admin"])], fallback_redirect="/denied"),
        title="any_of with fallback",
        console=console,
    )


if __name__ == "__main__":
    asyncio.run(main())
