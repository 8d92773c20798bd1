from typing import List, Optional, Sequence

from app.models.schemas import HotelQuery, HotelRecord
from app.storage.repository import JsonHotelRepository


class HotelQueryProcessor:
    def __init__(self, image_base_url: str):
        self.image_base_url = image_base_url

    def process(
        self,
        records: Sequence[HotelRecord],
        page_number: int,
        page_size: int,
        filter_text: Optional[str] = None,
        min_rating: float = 0.0,
        sort_option: Optional[str] = "name",
    ) -> List[HotelRecord]:
        """
        Filter, sort and paginate ``records``, then prefix image paths on the
        returned page with ``image_base_url``.

        Paging never fails: a page number below 1 reads from the start and a
        non-positive page size returns an empty page.
        """
        hotels = list(records)

        if filter_text and filter_text.strip():
            needle = filter_text.lower()
            hotels = [
                h
                for h in hotels
                if needle in h.name.lower() or needle in h.location.lower()
            ]

        hotels = [h for h in hotels if h.rating >= min_rating]

        if (sort_option or "").lower() == "rating":
            hotels = sorted(hotels, key=lambda h: h.rating, reverse=True)
        else:
            hotels = sorted(hotels, key=lambda h: (h.name.casefold(), h.name))

        skip = max(0, (page_number - 1) * page_size)
        take = max(0, page_size)
        page = hotels[skip : skip + take]

        return [self._with_image_urls(h) for h in page]

    def _with_image_urls(self, hotel: HotelRecord) -> HotelRecord:
        images = [f"{self.image_base_url}{img}" for img in hotel.images]
        return hotel.model_copy(update={"images": images})


class HotelService:
    def __init__(self, repository: JsonHotelRepository, processor: HotelQueryProcessor):
        self.repository = repository
        self.processor = processor

    async def get_hotels(self, query: HotelQuery) -> List[HotelRecord]:
        records = await self.repository.load()
        return self.processor.process(
            records,
            page_number=query.page_number,
            page_size=query.page_size,
            filter_text=query.filter_text,
            min_rating=query.min_rating,
            sort_option=query.sort_option,
        )
