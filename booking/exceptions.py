from datetime import date
from typing import Optional


class DatesUnavailable(Exception):
    """Thrown when the requested stay overlaps an existing booking"""

    def __init__(
            self,
            check_in: Optional[date] = None,
            check_out: Optional[date] = None,
            message: Optional[str] = None
    ) -> None:
        if message is None:
            message = "Hotel is not available for selected dates."
        super().__init__(message)
        self.check_in = check_in
        self.check_out = check_out
