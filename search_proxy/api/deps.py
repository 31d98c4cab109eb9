from __future__ import annotations

from fastapi import Request

from search_proxy.services.playground import PlaygroundSearch


def get_playground_search(request: Request) -> PlaygroundSearch:
    return request.app.state.playground_search
