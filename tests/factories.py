"""GitHub payload builders and an in-memory GitHub served through httpx.MockTransport."""

from __future__ import annotations

from typing import Any, Callable

import httpx

Handler = Callable[[httpx.Request], httpx.Response]


def user_payload(login: str = "alice", **overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "login": login,
        "name": None,
        "bio": None,
        "location": None,
        "public_repos": 3,
        "followers": 10,
        "following": 2,
        "created_at": "2015-06-01T12:00:00Z",
        "html_url": f"https://github.com/{login}",
    }
    data.update(overrides)
    return data


def repo_payload(
    name: str,
    language: str | None = None,
    stars: int = 0,
    fork: bool = False,
    **overrides: Any,
) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": name,
        "description": f"{name} description",
        "language": language,
        "stargazers_count": stars,
        "forks_count": 0,
        "watchers_count": stars,
        "open_issues_count": 0,
        "fork": fork,
        "updated_at": "2024-01-01T00:00:00Z",
        "html_url": f"https://github.com/alice/{name}",
    }
    data.update(overrides)
    return data


def commit_payload(message: str, date: str) -> dict[str, Any]:
    return {
        "sha": "0" * 40,
        "commit": {
            "message": message,
            "author": {"name": "Alice", "email": "alice@example.com", "date": date},
            "tree": {"sha": "1" * 40},
        },
    }


def rate_limited(reset: int | None = None) -> Handler:
    headers = {"x-ratelimit-remaining": "0"}
    if reset is not None:
        headers["x-ratelimit-reset"] = str(reset)

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"message": "API rate limit exceeded"}, headers=headers)

    return _handler


class FakeGitHub:
    """Routes requests by URL path; unknown paths answer 404."""

    def __init__(self) -> None:
        self.routes: dict[str, Handler] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        path: str,
        status: int = 200,
        json: Any = None,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        def _handler(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status, text=text, headers=headers)
            return httpx.Response(status, json=json, headers=headers)

        self.routes[path] = _handler

    def route(self, path: str, handler: Handler) -> None:
        self.routes[path] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(request.url.path)
        if handler is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]
