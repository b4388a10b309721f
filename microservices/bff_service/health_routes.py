"""
Health API Routes

/health pings the Medusa backend; /health/live and /health/ready only
report that the process is serving.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.medusa_client import MedusaGatewayProtocol
from core.payload import utc_timestamp

from .dependencies import get_medusa

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(medusa: MedusaGatewayProtocol = Depends(get_medusa)):
    """Backend connectivity check; 503 while Medusa is unreachable"""
    medusa_up = await medusa.health_check()
    return JSONResponse(
        status_code=200 if medusa_up else 503,
        content={
            "status": "ok" if medusa_up else "error",
            "medusa": "up" if medusa_up else "down",
            "timestamp": utc_timestamp(),
        },
    )


@router.get("/live")
async def liveness():
    return {"status": "ok", "timestamp": utc_timestamp()}


@router.get("/ready")
async def readiness():
    return {"status": "ok", "timestamp": utc_timestamp()}
