from slowapi import Limiter
from slowapi.util import get_remote_address

from src.core.config import get_settings

# Keyed on the peer address. Behind a proxy, run uvicorn with --proxy-headers and
# --forwarded-allow-ips set to the proxy so the client address is rewritten upstream.
limiter = Limiter(key_func=get_remote_address, default_limits=[])


def search_rate_limit() -> str:
    return get_settings().search_rate_limit
