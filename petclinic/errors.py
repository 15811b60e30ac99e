"""
Errores de dominio y su traducción a respuestas HTTP.
"""
import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ResourceNotFoundError(Exception):
    """Se lanza cuando una búsqueda por id no encuentra la entidad."""

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        self.message = f"{entity} {entity_id} not found"
        super().__init__(self.message)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ResourceNotFoundError)
    async def handle_not_found(_request: Request, exc: ResourceNotFoundError) -> JSONResponse:
        logger.warning("Resource not found: %s %s", exc.entity, exc.entity_id)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})
