import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api import get_app_settings, get_repository
from app.core.config import Settings
from app.models.schemas import HotelQuery, HotelRecord
from app.services.hotel_service import HotelQueryProcessor, HotelService
from app.storage.repository import HotelDataError, JsonHotelRepository

logger = logging.getLogger(__name__)

router = APIRouter()


def get_hotel_service(
    repository: JsonHotelRepository = Depends(get_repository),
    app_settings: Settings = Depends(get_app_settings),
) -> HotelService:
    return HotelService(
        repository=repository,
        processor=HotelQueryProcessor(image_base_url=app_settings.hotel_image_url),
    )


@router.get("/getHotels", response_model=List[HotelRecord])
async def get_hotels(
    page_number: int = Query(1, alias="pageNumber"),
    page_size: int = Query(9, alias="pageSize"),
    filter_text: Optional[str] = Query(None, alias="filterText"),
    min_rating: float = Query(0, alias="minRating"),
    sort_option: str = Query("name", alias="sortOption"),
    service: HotelService = Depends(get_hotel_service),
) -> List[HotelRecord]:
    """Filtered, sorted and paginated hotels; ``sortOption=rating`` sorts by rating descending."""
    query = HotelQuery(
        page_number=page_number,
        page_size=page_size,
        filter_text=filter_text,
        min_rating=min_rating,
        sort_option=sort_option,
    )
    try:
        return await service.get_hotels(query)
    except (OSError, HotelDataError) as exc:
        logger.error("Failed to load hotels: %s", exc, exc_info=True)
        raise HTTPException(
            status_code=500, detail=f"Failed to load hotels: {exc}"
        ) from exc
