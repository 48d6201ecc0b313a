import logging
from fastapi import APIRouter, Request

from app.relay.service import RelayService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/relay", tags=["relay"])


def get_relay_service() -> RelayService:
    return RelayService()


@router.get("/{path:path}")
async def relay(path: str, request: Request):
    logger.info(f"Relaying upstream request: path={path}")

    relay_service = get_relay_service()

    try:
        data = await relay_service.relay(
            path=path,
            params=request.query_params.multi_items()
        )

        return {
            "status": "success",
            "data": data
        }

    finally:
        await relay_service.close()
