import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    seed_sample_data: bool = True
    log_level: str = "INFO"

    tracing_enabled: bool = True
    otlp_endpoint: str = "http://localhost:4317"  # In Docker, this will be the collector
    metrics_enabled: bool = True

    api_prefix: str = "/api"
    gateway_timeout_seconds: float = 10.0
    # service name -> base URL the gateway forwards to
    upstreams: dict = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            seed_sample_data=_env_bool("SEED_SAMPLE_DATA", True),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            tracing_enabled=_env_bool("TRACING_ENABLED", True),
            otlp_endpoint=os.getenv("OTLP_ENDPOINT", "http://localhost:4317"),
            metrics_enabled=_env_bool("METRICS_ENABLED", True),
            api_prefix="/" + os.getenv("API_PREFIX", "/api").strip("/"),
            gateway_timeout_seconds=float(os.getenv("GATEWAY_TIMEOUT_SECONDS", "10.0")),
            upstreams={
                "books": os.getenv("BOOKS_SERVICE_URL", "http://localhost:3001"),
                "users": os.getenv("USERS_SERVICE_URL", "http://localhost:3002"),
                "orders": os.getenv("ORDERS_SERVICE_URL", "http://localhost:3003"),
                "reviews": os.getenv("REVIEWS_SERVICE_URL", "http://localhost:3004"),
            },
        )


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process; call get_settings.cache_clear() to reload."""
    return Settings.from_env()
