from slowapi import Limiter
from slowapi.util import get_remote_address
from fastapi import Request


def client_ip(request: Request) -> str:
    """
    Key function for SlowAPI.
    The storefront is anonymous, so every limit is per client IP
    (X-Forwarded-For is honoured when Uvicorn runs behind a proxy).
    """
    return f"ip:{get_remote_address(request)}"

limiter = Limiter(key_func=client_ip)
