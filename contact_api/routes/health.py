import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from contact_api.db.contacts import ContactRepository
from contact_api.utils.dependencies import get_contact_repository

log = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Report storage reachability",
    responses={503: {"description": "Storage unreachable"}},
)
async def health(request: Request, contacts: ContactRepository = Depends(get_contact_repository)):
    try:
        await contacts.ping()
    except PyMongoError as e:
        log.warning(f"Health check failed: {e}")
        request.app.state.storage_reachable = False
        return JSONResponse(content={"status": "degraded", "storage": "unreachable"}, status_code=503)
    request.app.state.storage_reachable = True
    return {"status": "ok", "storage": "reachable"}
