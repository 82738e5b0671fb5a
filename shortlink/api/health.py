from fastapi import APIRouter

from shortlink.db.Connection import database

router = APIRouter(tags=["health"])

# simple liveness
@router.get("/health")
def health():
    return {"status": "healthy", "service": "url-shortener"}

# readiness: check DB connectivity
@router.get("/ready")
def readiness():
    db_ok = database.verify_database_connection()
    return {"ready": db_ok, "details": {"db": "ok" if db_ok else "error"}}
