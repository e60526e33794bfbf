from typing import Optional

from fastapi import Request

IP_MAX_LENGTH = 45
USER_AGENT_MAX_LENGTH = 512


def get_client_ip(request: Request) -> str:
    """
    Extract client IP address from request.

    Checks the following headers in order:
    1. X-Forwarded-For (for proxy/load balancer scenarios)
    2. X-Real-IP
    3. Direct client IP from request
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()[:IP_MAX_LENGTH]

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()[:IP_MAX_LENGTH]

    return request.client.host if request.client else "unknown"


def get_user_agent(request: Request) -> Optional[str]:
    user_agent = request.headers.get("User-Agent")
    if not user_agent:
        return None
    return user_agent[:USER_AGENT_MAX_LENGTH]


def get_referrer(request: Request) -> Optional[str]:
    return request.headers.get("Referer") or None
