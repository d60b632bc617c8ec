"""
Google Travels MCP server.

Exposes flight, hotel and vacation rental search over SerpAPI as MCP tools, plus
a static airport-code resource. Tool argument names (camelCase) are part of the
published tool schema.
"""

import json
import logging
from typing import Annotated, Any, Awaitable, Callable, List, Optional

from fastmcp import FastMCP
from pydantic import Field

from google_travels_mcp.airports import airports_json
from google_travels_mcp.core.config import Settings, get_global_settings
from google_travels_mcp.core.error_handler import ErrorCode, error_handler
from google_travels_mcp.models.requests import CabinClass, FlightLeg, PropertyType
from google_travels_mcp.services import response_simplifier as simplifier
from google_travels_mcp.services.http_client import AsyncHttpClient, SerpApiError
from google_travels_mcp.services.serpapi_client import SerpApiClient

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp-google-travels"

# Shortest string accepted as a property token for a details lookup
MIN_PROPERTY_TOKEN_LENGTH = 10

VACATION_RENTAL_NOTE = (
    "Vacation rental results from Google Hotels. "
    "Look for properties with type='vacation rental' or 'apartment'."
)

READ_ONLY = {"readOnlyHint": True, "destructiveHint": False, "openWorldHint": True}

mcp = FastMCP(SERVER_NAME)


def get_serpapi_client(settings: Settings) -> SerpApiClient:
    """Build a SerpAPI client for one tool call."""
    http_config = settings.get_http_config()
    return SerpApiClient(
        api_key=settings.SERPAPI_API_KEY,
        http_client=AsyncHttpClient(timeout=http_config["timeout"]),
        base_url=http_config["base_url"],
    )


async def _fetch(tool_name: str, request: Callable[[SerpApiClient], Awaitable[Any]]) -> Any:
    """Run one aggregator request; any failure becomes an MCP tool error."""
    try:
        settings = get_global_settings()
        async with get_serpapi_client(settings) as client:
            return await request(client)
    except Exception as e:
        raise error_handler.to_tool_error(e, tool_name) from e


def _dump(payload: Any) -> str:
    return json.dumps(payload, indent=2)


def _invalid_hotel_id(hotel_id: str, note: str) -> str:
    """Rejection returned as a normal result so the assistant can recover."""
    error_handler.log_error(
        ErrorCode.INVALID_HOTEL_ID,
        f"Rejected hotelId of length {len(hotel_id)}",
        tool_name="get_hotel_details",
    )
    return _dump({
        "error": error_handler.ERROR_MESSAGES[ErrorCode.INVALID_HOTEL_ID],
        "note": note,
        "example": "Use the 'propertyToken' field from hotel search results",
    })


@mcp.resource(
    "mcp://airports",
    name="Airport Codes",
    description="List of common airport codes and names",
    mime_type="application/json",
)
def airports_resource() -> str:
    return airports_json()


@mcp.tool(
    name="search_flights",
    description=(
        "Browse flight options (no booking). Search for flights between airports with "
        "optional filters like dates, passengers, and cabin class."
    ),
    annotations={"title": "Search Flights", **READ_ONLY},
)
async def search_flights(
    origin: Annotated[str, Field(description="Departure airport code (e.g., 'SFO', 'JFK')")],
    destination: Annotated[str, Field(description="Arrival airport code (e.g., 'LAX', 'ORD')")],
    departureDate: Annotated[str, Field(description="Departure date in YYYY-MM-DD format")],
    returnDate: Annotated[
        Optional[str],
        Field(description="Return date in YYYY-MM-DD format (optional for one-way trips)"),
    ] = None,
    passengers: Annotated[int, Field(description="Number of passengers (default: 1)", ge=1)] = 1,
    cabinClass: Annotated[
        CabinClass, Field(description="Cabin class preference (default: economy)")
    ] = "economy",
) -> str:
    logger.info(f"search_flights {origin} -> {destination} ({departureDate})")

    raw = await _fetch(
        "search_flights",
        lambda client: client.search_flights(
            origin, destination, departureDate, returnDate, passengers, cabinClass
        ),
    )
    result = simplifier.simplify_flight_response(raw)

    logger.info(f"search_flights returned {result.summary.total_results} options")
    return _dump(result.to_payload())


@mcp.tool(
    name="search_multi_city",
    description=(
        "Multi-city flight search. Search for flights with multiple legs/destinations "
        "in a single trip."
    ),
    annotations={"title": "Search Multi-City Flights", **READ_ONLY},
)
async def search_multi_city(
    flights: Annotated[List[FlightLeg], Field(description="Array of flight legs")],
    passengers: Annotated[int, Field(description="Number of passengers (default: 1)", ge=1)] = 1,
    cabinClass: Annotated[
        CabinClass, Field(description="Cabin class preference (default: economy)")
    ] = "economy",
) -> str:
    logger.info(f"search_multi_city with {len(flights)} legs")

    legs = [leg.model_dump() for leg in flights]
    raw = await _fetch(
        "search_multi_city",
        lambda client: client.search_multi_city(legs, passengers, cabinClass),
    )
    result = simplifier.simplify_flight_response(raw)

    logger.info(f"search_multi_city returned {result.summary.total_results} options")
    return _dump(result.to_payload())


@mcp.tool(
    name="search_hotels",
    description=(
        "Hotel search. Search for hotels in a specific location with optional filters "
        "like dates, guests, amenities, and price range."
    ),
    annotations={"title": "Search Hotels", **READ_ONLY},
)
async def search_hotels(
    location: Annotated[
        str, Field(description="City name or location to search (e.g., 'San Francisco', 'Paris')")
    ],
    checkIn: Annotated[str, Field(description="Check-in date in YYYY-MM-DD format")],
    checkOut: Annotated[str, Field(description="Check-out date in YYYY-MM-DD format")],
    guests: Annotated[int, Field(description="Number of guests (default: 2)", ge=1)] = 2,
    rooms: Annotated[int, Field(description="Number of rooms (default: 1)", ge=1)] = 1,
    minPrice: Annotated[Optional[float], Field(description="Minimum price per night in USD")] = None,
    maxPrice: Annotated[Optional[float], Field(description="Maximum price per night in USD")] = None,
    starRating: Annotated[
        Optional[int], Field(description="Minimum star rating (1-5)", ge=1, le=5)
    ] = None,
    amenities: Annotated[
        Optional[List[str]],
        Field(description="Desired amenities (e.g., ['wifi', 'pool', 'parking', 'gym'])"),
    ] = None,
) -> str:
    logger.info(f"search_hotels in {location} ({checkIn} - {checkOut})")
    # SerpAPI has no room-count filter and takes amenities as numeric ids
    if rooms != 1 or amenities:
        logger.debug(f"search_hotels ignoring rooms={rooms} amenities={amenities}")

    raw = await _fetch(
        "search_hotels",
        lambda client: client.search_hotels(
            location, checkIn, checkOut, guests, minPrice, maxPrice, starRating
        ),
    )
    result = simplifier.simplify_hotel_response(
        raw, unify_identifiers=get_global_settings().UNIFY_HOTEL_IDENTIFIERS
    )

    logger.info(f"search_hotels returned {result.summary.total_results} properties")
    return _dump(result.to_payload())


@mcp.tool(
    name="get_hotel_details",
    description=(
        "Get comprehensive hotel details. Fetches full hotel information including complete "
        "description, all amenities, multiple pricing options from different booking sites, "
        "room types, images, policies, and nearby places. Use the propertyToken (hotelId) "
        "from search_hotels results."
    ),
    annotations={"title": "Get Hotel Details", **READ_ONLY},
)
async def get_hotel_details(
    hotelId: Annotated[
        str,
        Field(description="Property token from search results (the 'propertyToken' or 'hotelId' field)"),
    ],
) -> str:
    if not hotelId or len(hotelId) < MIN_PROPERTY_TOKEN_LENGTH:
        return _invalid_hotel_id(hotelId, "Please provide a valid property_token from search_hotels results.")

    if simplifier.is_fallback_hotel_id(hotelId):
        return _invalid_hotel_id(
            hotelId,
            "This property was returned without a property_token, so its details cannot be looked up.",
        )

    try:
        settings = get_global_settings()
        async with get_serpapi_client(settings) as client:
            raw = await client.get_property_details(hotelId)
    except SerpApiError as e:
        logger.warning(f"get_hotel_details lookup failed: {e.message}")
        return _dump({
            "hotelId": hotelId,
            "error": e.message,
            "note": "Failed to fetch hotel details. The property_token may be invalid or expired.",
            "suggestion": "Run search_hotels again to get fresh property tokens.",
        })
    except Exception as e:
        raise error_handler.to_tool_error(e, "get_hotel_details") from e

    return _dump(simplifier.simplify_hotel_details(raw, hotelId).to_payload())


@mcp.tool(
    name="search_vacation_rentals",
    description=(
        "Vacation rental search. Search for vacation rentals (homes, apartments, villas) "
        "in a specific location with optional filters."
    ),
    annotations={"title": "Search Vacation Rentals", **READ_ONLY},
)
async def search_vacation_rentals(
    location: Annotated[
        str, Field(description="City name or location to search (e.g., 'Miami Beach', 'Lake Tahoe')")
    ],
    checkIn: Annotated[str, Field(description="Check-in date in YYYY-MM-DD format")],
    checkOut: Annotated[str, Field(description="Check-out date in YYYY-MM-DD format")],
    guests: Annotated[int, Field(description="Number of guests (default: 2)", ge=1)] = 2,
    bedrooms: Annotated[Optional[int], Field(description="Minimum number of bedrooms")] = None,
    bathrooms: Annotated[Optional[int], Field(description="Minimum number of bathrooms")] = None,
    minPrice: Annotated[Optional[float], Field(description="Minimum price per night in USD")] = None,
    maxPrice: Annotated[Optional[float], Field(description="Maximum price per night in USD")] = None,
    propertyType: Annotated[
        Optional[PropertyType], Field(description="Type of property (default: any)")
    ] = None,
    amenities: Annotated[
        Optional[List[str]],
        Field(description="Desired amenities (e.g., ['wifi', 'kitchen', 'washer', 'pool', 'hot_tub'])"),
    ] = None,
) -> str:
    logger.info(f"search_vacation_rentals in {location} ({checkIn} - {checkOut})")

    raw = await _fetch(
        "search_vacation_rentals",
        lambda client: client.search_vacation_rentals(
            location, checkIn, checkOut, guests, minPrice, maxPrice
        ),
    )
    result = simplifier.simplify_hotel_response(
        raw, unify_identifiers=get_global_settings().UNIFY_HOTEL_IDENTIFIERS
    )

    # Filters SerpAPI cannot apply are echoed back for the assistant to apply itself
    requested_filters = {
        "bedrooms": bedrooms,
        "bathrooms": bathrooms,
        "propertyType": propertyType,
        "amenities": amenities,
    }
    payload = result.to_payload()
    payload["search_note"] = VACATION_RENTAL_NOTE
    payload["requested_filters"] = {k: v for k, v in requested_filters.items() if v is not None}

    logger.info(f"search_vacation_rentals returned {result.summary.total_results} properties")
    return _dump(payload)
