from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import ORJSONResponse

from search_proxy.api.deps import get_playground_search
from search_proxy.services.playground import PlaygroundSearch

router = APIRouter(tags=["search"])

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


@router.api_route("/search", methods=ALL_METHODS)
async def search(
    request: Request,
    playground: PlaygroundSearch = Depends(get_playground_search),
) -> ORJSONResponse:
    # First value wins when ``q`` is repeated.
    values = request.query_params.getlist("q")
    query = values[0] if values else None

    status_code, body = await playground.search(query)
    return ORJSONResponse(status_code=status_code, content=body.model_dump(exclude_unset=True))
