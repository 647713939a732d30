"""
Pass-through reverse proxy for the resource services.

No business logic lives here: the request is forwarded as-is to the
configured upstream and the upstream's answer is returned unchanged.
"""
import httpx
import structlog
from fastapi import HTTPException, Request, Response, status

from shared.observability import bookstore_gateway_upstream_failures_total

logger = structlog.get_logger(__name__)

# Connection-scoped headers that must not be forwarded (RFC 7230 6.1)
HOP_BY_HOP_HEADERS = {
    "connection",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "te",
    "trailer",
    "trailers",
    "transfer-encoding",
    "upgrade",
}

# httpx has already decoded the body, so length/encoding must be recomputed
RESPONSE_SKIP_HEADERS = HOP_BY_HOP_HEADERS | {"content-length", "content-encoding"}


class ServiceUnavailable(Exception):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"{service.capitalize()} Service unavailable")


class UpstreamProxy:
    def __init__(self, upstreams: dict[str, str], client: httpx.AsyncClient, api_prefix: str = "/api"):
        self.upstreams = {name: url.rstrip("/") for name, url in upstreams.items()}
        self.client = client
        self.api_prefix = api_prefix

    def target_url(self, service: str, path: str) -> str:
        base = self.upstreams.get(service)
        if base is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Route not found")
        url = f"{base}{self.api_prefix}/{service}"
        if path:
            url = f"{url}/{path}"
        return url

    async def forward(self, service: str, path: str, request: Request) -> Response:
        url = self.target_url(service, path)
        headers = {
            key: value
            for key, value in request.headers.items()
            if key.lower() not in HOP_BY_HOP_HEADERS and key.lower() != "host"
        }
        body = await request.body()

        try:
            upstream = await self.client.request(
                request.method,
                url,
                params=request.query_params.multi_items(),
                headers=headers,
                content=body,
            )
        except httpx.TransportError as e:
            bookstore_gateway_upstream_failures_total.labels(service=service).inc()
            logger.error("upstream_unavailable", service=service, url=url, error=str(e))
            raise ServiceUnavailable(service) from e

        logger.info("request_proxied", service=service, method=request.method, url=url, status=upstream.status_code)
        return Response(
            content=upstream.content,
            status_code=upstream.status_code,
            headers={
                key: value
                for key, value in upstream.headers.items()
                if key.lower() not in RESPONSE_SKIP_HEADERS
            },
        )
