import math
import unicodedata
from dataclasses import dataclass

from django.db.models import Q
from rest_framework.exceptions import ValidationError

from hotel.exceptions import HotelNotFound
from hotel.models import Hotel

PAGE_SIZE = 5

SORT_OPTIONS = {
    "starRating": ("-star_rating", "id"),
    "pricePerNightAsc": ("price_per_night", "id"),
    "pricePerNightDesc": ("-price_per_night", "id"),
}


@dataclass
class SearchResult:
    hotels: list
    total: int
    page: int
    pages: int


def _get_list(params, key: str) -> list[str]:
    if hasattr(params, "getlist"):
        values = params.getlist(key)
    else:
        value = params.get(key)
        if value is None:
            values = []
        elif isinstance(value, (list, tuple)):
            values = list(value)
        else:
            values = [value]
    return [str(value) for value in values if str(value).strip()]


def _parse_int(key: str, value: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError({key: f"'{value}' is not a valid integer."})


def _single_int(params, key: str) -> int | None:
    values = _get_list(params, key)
    if not values:
        return None
    return _parse_int(key, values[-1])


def destination_tokens(destination: str) -> list[str]:
    """Strip diacritics and whitespace, lower-case, split on commas."""
    decomposed = unicodedata.normalize("NFD", destination)
    stripped = "".join(
        char for char in decomposed
        if not unicodedata.combining(char) and not char.isspace()
    )
    return [token for token in stripped.lower().split(",") if token]


def build_search_filter(params) -> Q:
    """
    Translate search query parameters into a single Q predicate.

    Every present parameter adds one constraint and all constraints are
    AND-ed together; an empty Q matches every hotel.
    """
    query = Q()

    destination = _get_list(params, "destination")
    if destination:
        tokens = destination_tokens(",".join(destination))
        destination_query = Q()
        for token in tokens:
            destination_query |= Q(city__icontains=token)
            destination_query |= Q(country__icontains=token)
        query &= destination_query

    adult_count = _single_int(params, "adultCount")
    if adult_count is not None:
        query &= Q(adult_count__gte=adult_count)

    child_count = _single_int(params, "childCount")
    if child_count is not None:
        query &= Q(child_count__gte=child_count)

    # every requested facility needs its own match, hence one subquery each
    for facility in _get_list(params, "facilities"):
        query &= Q(
            pk__in=Hotel.facilities.through.objects.filter(
                facility__name=facility
            ).values("hotel_id")
        )

    types = _get_list(params, "types")
    if types:
        query &= Q(type__in=types)

    stars = [_parse_int("stars", star) for star in _get_list(params, "stars")]
    if stars:
        query &= Q(star_rating__in=stars)

    max_price = _single_int(params, "maxPrice")
    if max_price is not None:
        query &= Q(price_per_night__lte=max_price)

    return query


def parse_page(value) -> int:
    try:
        page = int(value)
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


def search_hotels(params, hotels=None) -> SearchResult:
    if hotels is None:
        hotels = Hotel.objects.all()

    queryset = hotels.filter(build_search_filter(params))
    ordering = SORT_OPTIONS.get(params.get("sortOption"), ("id",))
    queryset = queryset.order_by(*ordering).prefetch_related("facilities")

    page = parse_page(params.get("page"))
    offset = (page - 1) * PAGE_SIZE

    total = queryset.count()
    page_hotels = []
    if offset < total:
        page_hotels = list(queryset[offset:offset + PAGE_SIZE])

    return SearchResult(
        hotels=page_hotels,
        total=total,
        page=page,
        pages=math.ceil(total / PAGE_SIZE),
    )


def list_hotels(hotels=None):
    if hotels is None:
        hotels = Hotel.objects.all()
    return hotels.order_by("-last_updated").prefetch_related("facilities")


def get_hotel(hotel_id, hotels=None) -> Hotel:
    if hotels is None:
        hotels = Hotel.objects.all()
    try:
        return hotels.prefetch_related("facilities").get(pk=hotel_id)
    except Hotel.DoesNotExist:
        raise HotelNotFound(hotel_id)
