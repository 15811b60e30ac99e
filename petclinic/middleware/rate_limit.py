"""
Rate limiting por endpoint usando slowapi
"""
from fastapi import Request, HTTPException, status
from limits import parse
from slowapi.util import get_remote_address

def apply_rate_limit(request: Request, limit: str, scope: str):
    """
    Aplica rate limiting a un endpoint específico.
    Uso: apply_rate_limit(request, "30/minute", "pets:create")
    El contador va por cliente y `scope`, no por URL.

    Si el limiter no está configurado (por ejemplo, en tests), la función no hace nada.
    """
    limiter = getattr(request.app.state, "limiter", None)
    if limiter is None:
        return

    key = get_remote_address(request)
    # hit() incrementa el contador y devuelve False si se supera el límite
    if not limiter.limiter.hit(parse(limit), key, scope):
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=f"Too many requests. Limit: {limit}",
        )
