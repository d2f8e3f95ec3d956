"""Shared endpoint plumbing: domain-error translation and CSV attachments."""

from collections.abc import Sequence

from fastapi import HTTPException, Response, status
from pydantic import BaseModel

from backoffice.domain.exceptions import (
    BusinessRuleError,
    DuplicateEntityError,
    EntityNotFoundError,
    ReferencedEntityError,
)
from backoffice.reporting import ExportLayout, ExportUnavailableError

DOMAIN_ERRORS = (
    EntityNotFoundError,
    DuplicateEntityError,
    ReferencedEntityError,
    BusinessRuleError,
)


def http_error(error: Exception) -> HTTPException:
    """404 for missing entities, 409 for key/reference conflicts, 400 otherwise."""
    if isinstance(error, EntityNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, (DuplicateEntityError, ReferencedEntityError)):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(error))


def csv_attachment(layout: ExportLayout, payloads: Sequence[BaseModel]) -> Response:
    """Render response DTOs through an entity's CSV layout as a download."""
    try:
        export = layout.render([p.model_dump(mode="json") for p in payloads])
    except ExportUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return Response(
        content=export.content,
        media_type=f"{export.media_type}; charset=utf-8",
        headers={"Content-Disposition": export.content_disposition},
    )
