from fastapi import APIRouter
from typing import Dict, Any
from ..providers.one_click import OneClickProvider

router = APIRouter()


@router.get("/healthz")
async def health_check() -> Dict[str, Any]:
    """Health check endpoint that verifies provider status"""

    providers = [OneClickProvider()]

    provider_status = {}
    for provider in providers:
        provider_status[provider.name] = await provider.health_check()

    available_providers = sum(
        1 for status in provider_status.values()
        if status["status"] == "healthy"
    )

    return {
        "status": "healthy" if available_providers == len(provider_status) else "degraded",
        "providers": provider_status,
        "available_providers": available_providers,
        "total_providers": len(provider_status)
    }
