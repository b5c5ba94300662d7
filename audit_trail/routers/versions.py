from fastapi import APIRouter, Depends, HTTPException, Request

from audit_trail.dependencies import get_version_store
from audit_trail.middleware.rate_limit import save_limiter
from audit_trail.schemas.version import ErrorResponse, MessageResponse, VersionCreate, VersionSummary
from audit_trail.services.version_store import VersionStore

router = APIRouter(prefix="/api", tags=["versions"])


@router.post(
    "/save-version",
    response_model=VersionSummary,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@save_limiter
async def save_version(
    request: Request,
    data: VersionCreate,
    store: VersionStore = Depends(get_version_store),
) -> VersionSummary:
    return store.save(data.content)


@router.get("/versions", response_model=list[VersionSummary])
async def list_versions(
    store: VersionStore = Depends(get_version_store),
) -> list[VersionSummary]:
    """Version summaries in creation order, full content omitted."""
    return store.list()


@router.delete(
    "/versions/{version_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_version(
    version_id: str,
    store: VersionStore = Depends(get_version_store),
) -> MessageResponse:
    if not store.delete(version_id):
        raise HTTPException(status_code=404, detail="Version not found")
    return MessageResponse(message="Version deleted successfully")
