import logging

from fastapi import APIRouter, Request

from rate_directory.core.errors import StoreFailure
from rate_directory.services.directory import STORE_ERRORS

router = APIRouter(tags=["health"])
logger = logging.getLogger("rate_directory.health")


@router.get("/health", summary="Liveness and store connectivity check")
def health(request: Request):
    store = request.app.state.store
    try:
        store.ping()
    except STORE_ERRORS as e:
        logger.exception("health check failed")
        raise StoreFailure("Store unavailable") from e
    return {"status": "ok", "version": request.app.version}
