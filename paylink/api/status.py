import logging
from typing import Any, Dict

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from ..config import settings
from ..core.swap_status import next_poll_interval, normalize_execution_status
from ..providers.one_click import OneClickProvider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


async def fetch_execution_status(deposit_address: str) -> Dict[str, Any]:
    provider = OneClickProvider()
    return await provider.get_execution_status(deposit_address)


@router.get("/status")
async def get_status(
    deposit_address: str = Query(default="", alias="depositAddress", description="Swap deposit address"),
) -> JSONResponse:
    """Normalized execution status of the swap behind ``depositAddress``."""
    deposit_address = deposit_address.strip()
    if not deposit_address:
        return JSONResponse(status_code=400, content={"error": "Missing depositAddress"})

    try:
        raw = await fetch_execution_status(deposit_address)
    except Exception as exc:
        logger.warning("Status fetch failed for %s: %s", deposit_address, exc)
        return JSONResponse(status_code=500, content={"error": str(exc) or "Failed to fetch status"})

    normalized = normalize_execution_status(raw)
    headers = {}
    interval = next_poll_interval(normalized.status, settings.status_poll_interval_seconds)
    if interval is not None:
        headers["x-poll-interval"] = str(interval)
    return JSONResponse(status_code=200, content=normalized.to_response(), headers=headers)
