from fastapi import APIRouter, HTTPException, status
from datetime import datetime

from ..db import check_db_connection

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    # Liveness only; the database is checked by /ready
    return {"status": "healthy", "timestamp": datetime.utcnow().isoformat()}


@router.get("/ready")
def readiness_check():
    db_connected = check_db_connection()
    body = {
        "status": "ready" if db_connected else "not_ready",
        "database": "connected" if db_connected else "disconnected",
        "timestamp": datetime.utcnow().isoformat(),
    }
    if not db_connected:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=body)
    return body
