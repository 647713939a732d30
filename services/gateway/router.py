from datetime import datetime, timezone

from fastapi import APIRouter, Request

from .proxy import UpstreamProxy

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]

router = APIRouter()
public_router = APIRouter()  # For any public endpoints (e.g. health check)


def get_proxy(request: Request) -> UpstreamProxy:
    return request.app.state.proxy


@public_router.get("/health")
async def health_check(request: Request):
    return {
        "success": True,
        "message": "API Gateway is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": get_proxy(request).upstreams,
    }


@router.api_route("/{service}{rest:path}", methods=PROXY_METHODS, include_in_schema=False)
async def proxy_request(service: str, rest: str, request: Request):
    return await get_proxy(request).forward(service, rest.lstrip("/"), request)
