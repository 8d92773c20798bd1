from fastapi import APIRouter, Depends

from app.api import get_repository
from app.storage.repository import JsonHotelRepository

router = APIRouter()


@router.get("/health")
def healthcheck(repository: JsonHotelRepository = Depends(get_repository)) -> dict:
    return {"status": "ok", "hotelsFileFound": repository.path.is_file()}
