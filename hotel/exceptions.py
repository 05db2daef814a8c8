from typing import Optional


class HotelNotFound(Exception):
    """Thrown when a hotel id does not resolve"""

    def __init__(
            self,
            hotel_id: Optional[int] = None,
            message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"Hotel {hotel_id} not found" if hotel_id else "Hotel not found"
        super().__init__(message)
        self.hotel_id = hotel_id
