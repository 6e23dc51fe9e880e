"""
fix_karachi.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) that pings the identity/data provider.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from fix_karachi.api.deps import backend_client
from fix_karachi.backend.protocol import BackendClient
from fix_karachi.backend.results import Ok

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(backend: BackendClient = Depends(backend_client)) -> JSONResponse:
    if isinstance(await backend.ping(), Ok):
        return JSONResponse({"status": "ready"})
    return JSONResponse({"status": "unavailable"}, status_code=HTTP_503_SERVICE_UNAVAILABLE)
