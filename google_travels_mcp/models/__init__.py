# Pydantic models for provider payloads, tool arguments and tool results

from .provider import RawFlightSearchResult, RawHotelSearchResult, RawHotelDetails
from .requests import CabinClass, PropertyType, FlightLeg
from .responses import (
    PriceRange,
    SimplifiedFlight,
    FlightSearchResponse,
    SimplifiedHotel,
    HotelSearchResponse,
    HotelDetails,
    ErrorResponse,
)

__all__ = [
    "RawFlightSearchResult",
    "RawHotelSearchResult",
    "RawHotelDetails",
    "CabinClass",
    "PropertyType",
    "FlightLeg",
    "PriceRange",
    "SimplifiedFlight",
    "FlightSearchResponse",
    "SimplifiedHotel",
    "HotelSearchResponse",
    "HotelDetails",
    "ErrorResponse",
]
