from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "Report Mapping Dashboard",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }
