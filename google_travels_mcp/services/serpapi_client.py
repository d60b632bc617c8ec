"""
SerpAPI client for the Google Flights and Google Hotels engines.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from google_travels_mcp.services.http_client import AsyncHttpClient

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://serpapi.com/search"

# SerpAPI travel_class codes
CABIN_CLASS_CODES = {
    "economy": "1",
    "premium_economy": "2",
    "business": "3",
    "first": "4",
}

# SerpAPI google_flights trip types
ROUND_TRIP = "1"
ONE_WAY = "2"
MULTI_CITY = "3"


def map_cabin_class(cabin_class: Optional[str]) -> str:
    """Map a cabin class name to its SerpAPI travel_class code, economy when unknown."""
    return CABIN_CLASS_CODES.get(cabin_class or "", CABIN_CLASS_CODES["economy"])


def hotel_class_filter(star_rating: int) -> str:
    """Minimum star rating to SerpAPI hotel_class list (3 -> '3,4,5')."""
    return ",".join(str(stars) for stars in range(int(star_rating), 6))


def format_price(value: float) -> str:
    """Exact decimal form of a price filter (100.0 -> '100', 12345.67 -> '12345.67')."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class SerpApiClient:
    """
    Thin client over the SerpAPI search endpoint.

    Each method returns the decoded provider JSON untouched; shaping happens in
    the response simplifier.
    """

    def __init__(
        self,
        api_key: str,
        http_client: Optional[AsyncHttpClient] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = 30,
    ):
        """
        Initialize the SerpAPI client.

        Args:
            api_key: SerpAPI key
            http_client: Optional HTTP client instance
            base_url: Search endpoint
            timeout: Request timeout in seconds, used when no client is supplied
        """
        self.api_key = api_key
        self.base_url = base_url
        self.http_client = http_client or AsyncHttpClient(timeout=timeout)

    async def _search(self, params: Dict[str, Any]) -> Any:
        query = {
            **params,
            "currency": "USD",
            "hl": "en",
            "api_key": self.api_key,
        }
        return await self.http_client.get_json(self.base_url, query)

    async def search_flights(
        self,
        origin: str,
        destination: str,
        departure_date: str,
        return_date: Optional[str] = None,
        passengers: int = 1,
        cabin_class: str = "economy",
    ) -> Any:
        """Round trip when return_date is given, one way otherwise."""
        params = {
            "engine": "google_flights",
            "departure_id": origin,
            "arrival_id": destination,
            "outbound_date": departure_date,
            "adults": str(passengers),
            "travel_class": map_cabin_class(cabin_class),
            "type": ROUND_TRIP if return_date else ONE_WAY,
        }
        if return_date:
            params["return_date"] = return_date

        logger.info(f"Searching flights {origin} -> {destination} on {departure_date}")
        return await self._search(params)

    async def search_multi_city(
        self,
        legs: List[Dict[str, str]],
        passengers: int = 1,
        cabin_class: str = "economy",
    ) -> Any:
        """
        Search a multi-city itinerary.

        Args:
            legs: Ordered legs, each with origin, destination and departureDate
            passengers: Number of adults
            cabin_class: Cabin class name
        """
        multi_city = [
            {
                "departure_id": leg["origin"],
                "arrival_id": leg["destination"],
                "date": leg["departureDate"],
            }
            for leg in legs
        ]
        params = {
            "engine": "google_flights",
            "type": MULTI_CITY,
            "adults": str(passengers),
            "travel_class": map_cabin_class(cabin_class),
            "multi_city_json": json.dumps(multi_city),
        }

        logger.info(f"Searching multi-city itinerary with {len(legs)} legs")
        return await self._search(params)

    async def search_hotels(
        self,
        location: str,
        check_in: str,
        check_out: str,
        guests: int = 2,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        star_rating: Optional[int] = None,
    ) -> Any:
        params = self._lodging_params(location, check_in, check_out, guests, min_price, max_price)
        if star_rating:
            params["hotel_class"] = hotel_class_filter(star_rating)

        logger.info(f"Searching hotels in {location} from {check_in} to {check_out}")
        return await self._search(params)

    async def search_vacation_rentals(
        self,
        location: str,
        check_in: str,
        check_out: str,
        guests: int = 2,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
    ) -> Any:
        """Google Hotels has no rental engine; the location query is narrowed instead."""
        params = self._lodging_params(
            f"{location} vacation rental", check_in, check_out, guests, min_price, max_price
        )

        logger.info(f"Searching vacation rentals in {location} from {check_in} to {check_out}")
        return await self._search(params)

    async def get_property_details(self, property_token: str) -> Any:
        """Fetch a single property by the token returned from a hotel search."""
        params = {
            "engine": "google_hotels",
            "property_token": property_token,
        }

        logger.info("Fetching hotel details by property token")
        return await self._search(params)

    def _lodging_params(
        self,
        query: str,
        check_in: str,
        check_out: str,
        guests: int,
        min_price: Optional[float],
        max_price: Optional[float],
    ) -> Dict[str, Any]:
        params = {
            "engine": "google_hotels",
            "q": query,
            "check_in_date": check_in,
            "check_out_date": check_out,
            "adults": str(guests),
        }
        # Zero means "no filter"
        if min_price:
            params["min_price"] = format_price(min_price)
        if max_price:
            params["max_price"] = format_price(max_price)
        return params

    async def close(self) -> None:
        """Close the underlying HTTP client"""
        await self.http_client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
