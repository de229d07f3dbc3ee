from fastapi import APIRouter

from orderly.modules.database import health_check

router = APIRouter(tags=["System"])


@router.get("/")
async def root():
    return {"status": "online", "system": "Orderly"}


@router.get("/health")
async def health():
    """
    Reports whether the database answers. Always 200 so load balancers can
    tell a degraded service from a dead one.
    """
    db_ok = await health_check()
    return {"status": "ok" if db_ok else "degraded", "database": db_ok}
