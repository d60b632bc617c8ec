"""
Response simplification for SerpAPI flight and hotel searches.

Reduces the provider's large, nested payloads to a compact, uniform shape while
keeping the tokens needed for follow-up lookups (booking_token, departure_token,
property_token). Missing or malformed fields always degrade to a default; these
functions never raise on provider data.
"""

import hashlib
import re
from typing import Any, Iterable, List, Optional

from google_travels_mcp.models.provider import (
    RawFlightLeg,
    RawFlightOption,
    RawFlightSearchResult,
    RawHotelDetails,
    RawHotelProperty,
    RawHotelSearchResult,
)
from google_travels_mcp.models.responses import (
    FlightEndpoint,
    FlightSearchResponse,
    FlightSearchSummary,
    HotelDetails,
    HotelLocation,
    HotelPolicies,
    HotelPrice,
    HotelSearchResponse,
    HotelSearchSummary,
    Number,
    PriceRange,
    SimplifiedFlight,
    SimplifiedHotel,
)

CURRENCY = "USD"
MAX_OTHER_FLIGHTS = 5
MAX_HIGHLIGHTS = 3
MAX_HOTEL_PROPERTIES = 10
MAX_HOTEL_AMENITIES = 5

MAX_DETAIL_PRICES = 5
MAX_DETAIL_AMENITIES = 15
MAX_DETAIL_IMAGES = 10
MAX_DETAIL_ROOMS = 5
MAX_DETAIL_NEARBY_PLACES = 5

FALLBACK_HOTEL_ID_PREFIX = "HTL-"

_WHITESPACE = re.compile(r"\s+")


def simplify_flight_response(raw: Any) -> FlightSearchResponse:
    """
    Simplify a SerpAPI Google Flights response.

    Args:
        raw: Decoded JSON from the google_flights engine

    Returns:
        FlightSearchResponse with every best flight, at most five other flights,
        and a summary counting all options before truncation
    """
    result = RawFlightSearchResult.parse_lenient(raw)

    best_flights = [simplify_flight_option(option) for option in result.best_flights]
    other_flights = [simplify_flight_option(option) for option in result.other_flights]

    summary = FlightSearchSummary(
        search_params=result.search_parameters,
        total_results=len(best_flights) + len(other_flights),
        price_range=_price_range(flight.price for flight in best_flights + other_flights),
        google_flights_url=result.search_metadata.google_flights_url,
    )

    return FlightSearchResponse(
        summary=summary,
        best_flights=best_flights,
        other_flights=other_flights[:MAX_OTHER_FLIGHTS],
        price_insights=result.price_insights,
    )


def simplify_flight_option(option: RawFlightOption) -> SimplifiedFlight:
    """Project one priced itinerary onto a SimplifiedFlight."""
    legs = option.flights
    first_leg = legs[0] if legs else RawFlightLeg()
    last_leg = legs[-1] if legs else first_leg

    arrival = last_leg.arrival_airport
    if not any((arrival.name, arrival.id, arrival.time)):
        arrival = last_leg.departure_airport

    return SimplifiedFlight(
        airline=first_leg.airline or "Unknown",
        flight_number=first_leg.flight_number or "",
        departure=FlightEndpoint(
            airport=first_leg.departure_airport.name or "",
            code=first_leg.departure_airport.id or "",
            time=first_leg.departure_airport.time or "",
        ),
        arrival=FlightEndpoint(
            airport=arrival.name or "",
            code=arrival.id or "",
            time=arrival.time or "",
        ),
        duration=format_duration(option.total_duration or 0),
        stops=max(len(legs) - 1, 0),
        price=option.price or 0,
        currency=CURRENCY,
        booking_token=option.booking_token,
        departure_token=option.departure_token,
        highlights=build_flight_highlights(option),
    )


def build_flight_highlights(option: RawFlightOption) -> List[str]:
    """Collect highlights in priority order: CO2, legroom, travel class, trip type."""
    highlights = []
    first_leg = option.flights[0] if option.flights else RawFlightLeg()

    percent = option.carbon_emissions.difference_percent
    if percent is not None and percent < 0:
        highlights.append(f"{_plain_number(abs(percent))}% less CO2")

    if first_leg.legroom:
        highlights.append(f"Legroom: {first_leg.legroom}")

    if first_leg.travel_class:
        highlights.append(first_leg.travel_class)

    if option.type:
        highlights.append(option.type)

    return highlights[:MAX_HIGHLIGHTS]


def format_duration(minutes: Number) -> str:
    """Render total minutes as '<H>h <M>m' (385 -> '6h 25m')."""
    hours, mins = divmod(int(minutes), 60)
    return f"{hours}h {mins}m"


def simplify_hotel_response(raw: Any, unify_identifiers: bool = False) -> HotelSearchResponse:
    """
    Simplify a SerpAPI Google Hotels response (hotels and vacation rentals).

    Args:
        raw: Decoded JSON from the google_hotels engine
        unify_identifiers: Copy a derived hotelId into propertyToken when the
            provider omitted the token. Off by default, in which case such a
            property keeps an empty propertyToken and cannot be looked up.

    Returns:
        HotelSearchResponse with at most ten properties; the summary covers all of them
    """
    result = RawHotelSearchResult.parse_lenient(raw)

    properties = [
        simplify_hotel_property(prop, unify_identifiers=unify_identifiers)
        for prop in result.properties
    ]

    summary = HotelSearchSummary(
        search_params=result.search_parameters,
        total_results=len(properties),
        price_range=_price_range(p.price_per_night for p in properties if p.price_per_night > 0),
    )

    return HotelSearchResponse(
        summary=summary,
        properties=properties[:MAX_HOTEL_PROPERTIES],
    )


def simplify_hotel_property(prop: RawHotelProperty, unify_identifiers: bool = False) -> SimplifiedHotel:
    """Project one lodging property onto a SimplifiedHotel."""
    hotel_id = prop.property_token or generate_hotel_id(prop)
    property_token = prop.property_token or ""
    if unify_identifiers and not property_token:
        property_token = hotel_id

    return SimplifiedHotel(
        hotel_id=hotel_id,
        name=prop.name or "Unknown Property",
        type=prop.type or "hotel",
        rating=prop.overall_rating,
        review_count=prop.reviews,
        price_per_night=prop.rate_per_night.extracted_lowest or 0,
        total_price=prop.total_rate.extracted_lowest or 0,
        currency=CURRENCY,
        location=prop.neighborhood or prop.location or "",
        property_token=property_token,
        booking_link=prop.link,
        amenities=prop.amenities[:MAX_HOTEL_AMENITIES] if prop.amenities is not None else None,
        check_in=prop.check_in_time,
        check_out=prop.check_out_time,
    )


def generate_hotel_id(prop: RawHotelProperty) -> str:
    """
    Derive a stable id for a property that came without a property_token.

    The id only has to be unique and reproducible within a result set; it is not
    a provider token and cannot be used for a details lookup.
    """
    name = prop.name or ""
    slug = _WHITESPACE.sub("-", name)[:20]
    fingerprint = "|".join(
        value or ""
        for value in (name, prop.neighborhood or prop.location, prop.check_in_time, prop.check_out_time)
    )
    digest = hashlib.sha1(fingerprint.encode("utf-8")).hexdigest()[:12]
    return f"{FALLBACK_HOTEL_ID_PREFIX}{slug}-{digest}"


def is_fallback_hotel_id(hotel_id: str) -> bool:
    return hotel_id.startswith(FALLBACK_HOTEL_ID_PREFIX)


def simplify_hotel_details(raw: Any, hotel_id: str) -> HotelDetails:
    """
    Simplify a SerpAPI Google Hotels property-details response.

    Args:
        raw: Decoded JSON from a google_hotels property_token lookup
        hotel_id: The property token that was looked up

    Returns:
        HotelDetails with bounded price, amenity, image, room and nearby lists
    """
    details = RawHotelDetails.parse_lenient(raw)

    prices = None
    if details.rates is not None:
        prices = [
            HotelPrice(source=rate.source, rate=rate.rate, total=rate.total)
            for rate in details.rates[:MAX_DETAIL_PRICES]
        ]

    images = None
    if details.images is not None:
        images = [
            image.thumbnail or image.link
            for image in details.images
            if image.thumbnail or image.link
        ][:MAX_DETAIL_IMAGES]

    return HotelDetails(
        hotel_id=hotel_id,
        name=details.name or "Unknown",
        type=details.type or "hotel",
        description=details.description,
        check_in=details.check_in_time,
        check_out=details.check_out_time,
        rating=details.overall_rating,
        reviews=details.reviews,
        location=HotelLocation(
            address=details.address,
            neighborhood=details.neighborhood,
            coordinates=details.gps_coordinates,
        ),
        prices=prices,
        amenities=_head(details.amenities, MAX_DETAIL_AMENITIES),
        images=images,
        rooms=_head(details.rooms, MAX_DETAIL_ROOMS),
        policies=HotelPolicies(
            check_in=details.check_in_time,
            check_out=details.check_out_time,
            cancellation=details.policies.cancellation,
            children=details.policies.children,
        ),
        nearby_places=_head(details.nearby_places, MAX_DETAIL_NEARBY_PLACES),
        property_token=hotel_id,
    )


def _price_range(prices: Iterable[Number]) -> Optional[PriceRange]:
    prices = list(prices)
    if not prices:
        return None
    return PriceRange(min=min(prices), max=max(prices))


def _plain_number(value: Number) -> Number:
    """Integral floats lose their trailing .0 (12.0 -> 12)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _head(items: Optional[List[Any]], limit: int) -> Optional[List[Any]]:
    if items is None:
        return None
    return items[:limit]
