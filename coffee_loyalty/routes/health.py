from fastapi import APIRouter


router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok", "message": "Server is running."}


@router.get("/status")
def status():
    return {"status": "ok", "message": "Status route is working."}
