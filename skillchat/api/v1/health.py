from fastapi import APIRouter

from skillchat.core.lifespan import integration_status

router = APIRouter()

@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return {"status": "healthy"}


@router.get("/health/integrations", summary="Integration Status", description="Report which external services are configured.")
async def integrations_status():
    return integration_status()
