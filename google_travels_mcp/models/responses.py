"""Response models returned by the Google Travels MCP tools."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Number = Union[int, float]


class CamelModel(BaseModel):
    """Output model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict; unset optional fields are left out rather than emitted as null."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PriceRange(CamelModel):
    min: Number
    max: Number


class FlightEndpoint(CamelModel):
    airport: str = ""
    code: str = ""
    time: str = ""


class SimplifiedFlight(CamelModel):
    """One priced itinerary reduced to what a follow-up booking flow needs."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "airline": "Frontier",
                "flightNumber": "F9 2503",
                "departure": {"airport": "John F. Kennedy International Airport", "code": "JFK", "time": "2025-06-15 11:00"},
                "arrival": {"airport": "Los Angeles International Airport", "code": "LAX", "time": "2025-06-15 17:25"},
                "duration": "6h 25m",
                "stops": 0,
                "price": 926,
                "currency": "USD",
                "bookingToken": "WyJDalJJ...",
                "highlights": ["Legroom: 28 in", "Economy", "Round trip"]
            }
        }
    )

    airline: str = Field(..., description="Operating airline of the first leg")
    flight_number: str = Field(..., description="Flight number of the first leg")
    departure: FlightEndpoint = Field(..., description="Departure airport of the first leg")
    arrival: FlightEndpoint = Field(..., description="Arrival airport of the last leg")
    duration: str = Field(..., description="Total duration as '<H>h <M>m'")
    stops: int = Field(..., description="Number of connections", ge=0)
    price: Number = Field(..., description="Total price")
    currency: str = Field(default="USD", description="Currency of price")
    booking_token: Optional[str] = Field(default=None, description="Token for the booking options lookup")
    departure_token: Optional[str] = Field(default=None, description="Token for the return-leg lookup")
    highlights: List[str] = Field(default_factory=list, description="Up to three notable features")


class FlightSearchSummary(CamelModel):
    search_params: Optional[Dict[str, Any]] = None
    total_results: int = Field(..., ge=0)
    price_range: Optional[PriceRange] = None
    google_flights_url: Optional[str] = None


class FlightSearchResponse(CamelModel):
    summary: FlightSearchSummary
    best_flights: List[SimplifiedFlight]
    other_flights: List[SimplifiedFlight]
    price_insights: Optional[Any] = None


class SimplifiedHotel(CamelModel):
    """One lodging property reduced to display fields plus its lookup token."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "hotelId": "ChkI6dTm1ZPM8pYBGg0vZy8xMXM2cXB0X3NjEAE",
                "name": "Hotel Nikko San Francisco",
                "type": "hotel",
                "rating": 4.3,
                "reviewCount": 3521,
                "pricePerNight": 189,
                "totalPrice": 378,
                "currency": "USD",
                "location": "Union Square",
                "propertyToken": "ChkI6dTm1ZPM8pYBGg0vZy8xMXM2cXB0X3NjEAE",
                "amenities": ["Free Wi-Fi", "Pool", "Fitness centre"]
            }
        }
    )

    hotel_id: str = Field(..., description="Provider token, or a derived id when the provider omits it")
    name: str = Field(..., description="Property name")
    type: str = Field(..., description="Free-text category, e.g. 'hotel' or 'vacation rental'")
    rating: Optional[Number] = Field(default=None, description="Overall rating")
    review_count: Optional[int] = Field(default=None, description="Number of reviews")
    price_per_night: Number = Field(..., description="Lowest nightly rate")
    total_price: Number = Field(..., description="Lowest total rate for the stay")
    currency: str = Field(default="USD")
    location: str = Field(default="", description="Neighborhood or location string")
    property_token: str = Field(default="", description="Token for get_hotel_details")
    booking_link: Optional[str] = Field(default=None, description="Direct booking URL")
    amenities: Optional[List[str]] = Field(default=None, description="Up to five amenities")
    check_in: Optional[str] = None
    check_out: Optional[str] = None


class HotelSearchSummary(CamelModel):
    search_params: Optional[Dict[str, Any]] = None
    total_results: int = Field(..., ge=0)
    price_range: Optional[PriceRange] = None


class HotelSearchResponse(CamelModel):
    summary: HotelSearchSummary
    properties: List[SimplifiedHotel]


class HotelLocation(CamelModel):
    address: Optional[str] = None
    neighborhood: Optional[str] = None
    coordinates: Optional[Dict[str, Any]] = None


class HotelPrice(CamelModel):
    source: Optional[Any] = None
    rate: Optional[Any] = None
    total: Optional[Any] = None


class HotelPolicies(CamelModel):
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    cancellation: Optional[Any] = None
    children: Optional[Any] = None


class HotelDetails(CamelModel):
    """Full record for a single property fetched by its token."""

    hotel_id: str
    name: str
    type: str
    description: Optional[str] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    rating: Optional[Number] = None
    reviews: Optional[int] = None
    location: HotelLocation
    prices: Optional[List[HotelPrice]] = None
    amenities: Optional[List[str]] = None
    images: Optional[List[str]] = None
    rooms: Optional[List[Any]] = None
    policies: HotelPolicies
    nearby_places: Optional[List[Any]] = None
    property_token: str


class ErrorResponse(BaseModel):
    """Error payload for consistent error reporting."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "UPSTREAM_HTTP_ERROR",
                "message": "SerpAPI request failed: 500 Internal Server Error",
                "timestamp": "2024-01-15T10:30:00Z"
            }
        }
    )

    error: str = Field(..., description="Error code or type")
    message: str = Field(..., description="Human-readable error message")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Error timestamp"
    )
