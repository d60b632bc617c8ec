"""
Test fixtures with sample SerpAPI payloads.
Provides realistic provider data for simplifier, client and server tests.
"""

import copy
from typing import Any, Dict, List


def _flight_leg(
    departure: Dict[str, str],
    arrival: Dict[str, str],
    airline: str,
    flight_number: str,
    legroom: str = "31 in",
    travel_class: str = "Economy",
) -> Dict[str, Any]:
    return {
        "departure_airport": departure,
        "arrival_airport": arrival,
        "duration": 185,
        "airplane": "Airbus A321",
        "airline": airline,
        "airline_logo": "https://www.gstatic.com/flights/airline_logos/70px/AA.png",
        "travel_class": travel_class,
        "flight_number": flight_number,
        "legroom": legroom,
        "extensions": ["Average legroom (31 in)", "Wi-Fi for a fee"],
    }


JFK = {"name": "John F. Kennedy International Airport", "id": "JFK", "time": "2025-06-15 08:00"}
ORD_ARRIVAL = {"name": "O'Hare International Airport", "id": "ORD", "time": "2025-06-15 09:50"}
ORD_DEPARTURE = {"name": "O'Hare International Airport", "id": "ORD", "time": "2025-06-15 11:05"}
DEN_ARRIVAL = {"name": "Denver International Airport", "id": "DEN", "time": "2025-06-15 12:40"}
DEN_DEPARTURE = {"name": "Denver International Airport", "id": "DEN", "time": "2025-06-15 13:30"}
LAX = {"name": "Los Angeles International Airport", "id": "LAX", "time": "2025-06-15 15:05"}


class FlightFixtures:
    """Sample google_flights engine responses."""

    FLIGHTS_RESPONSE: Dict[str, Any] = {
        "search_metadata": {
            "id": "6661b2f3a1e3c4d5e6f70812",
            "status": "Success",
            "google_flights_url": "https://www.google.com/travel/flights?hl=en&gl=us&curr=USD&tfs=CBwQAho",
            "total_time_taken": 3.41,
        },
        "search_parameters": {
            "engine": "google_flights",
            "hl": "en",
            "departure_id": "JFK",
            "arrival_id": "LAX",
            "outbound_date": "2025-06-15",
            "currency": "USD",
            "type": "2",
        },
        "best_flights": [
            {
                "flights": [_flight_leg(JFK, LAX, "Delta", "DL 423")],
                "total_duration": 385,
                "carbon_emissions": {
                    "this_flight": 312000,
                    "typical_for_this_route": 340000,
                    "difference_percent": -8,
                },
                "price": 389,
                "type": "One way",
                "airline_logo": "https://www.gstatic.com/flights/airline_logos/70px/DL.png",
                "booking_token": "WyJDalJJY1RGTWRtMXRVR1l6V1VWQlEzQ",
            },
            {
                "flights": [
                    _flight_leg(JFK, ORD_ARRIVAL, "American", "AA 1022"),
                    _flight_leg(ORD_DEPARTURE, LAX, "American", "AA 2301"),
                ],
                "layovers": [{"duration": 75, "name": "O'Hare International Airport", "id": "ORD"}],
                "total_duration": 425,
                "carbon_emissions": {"difference_percent": 4},
                "price": 312,
                "type": "One way",
                "departure_token": "WyJDalJJY1RGTWRtMXRVR1l6V1VWQlEzQVJ",
            },
        ],
        "other_flights": [
            {
                "flights": [
                    _flight_leg(JFK, ORD_ARRIVAL, "United", f"UA {100 + i}"),
                    _flight_leg(ORD_DEPARTURE, DEN_ARRIVAL, "United", f"UA {200 + i}"),
                    _flight_leg(DEN_DEPARTURE, LAX, "United", f"UA {300 + i}"),
                ],
                "total_duration": 540 + i,
                "price": 250 + 10 * i,
                "type": "One way",
                "booking_token": f"OTHER-TOKEN-{i}",
            }
            for i in range(7)
        ],
        "price_insights": {
            "lowest_price": 250,
            "price_level": "low",
            "typical_price_range": [280, 420],
        },
    }

    # Literal option used to pin down the full projection
    FRONTIER_OPTION: Dict[str, Any] = {
        "flights": [
            {
                "departure_airport": {"name": "JFK Intl", "id": "JFK", "time": "11:00"},
                "airline": "Frontier",
                "flight_number": "F9 2503",
                "legroom": "28 in",
                "travel_class": "Economy",
            }
        ],
        "total_duration": 385,
        "price": 926,
        "type": "Round trip",
        "booking_token": "TOK1",
    }

    @classmethod
    def flights_response(cls) -> Dict[str, Any]:
        return copy.deepcopy(cls.FLIGHTS_RESPONSE)

    @classmethod
    def frontier_option(cls) -> Dict[str, Any]:
        return copy.deepcopy(cls.FRONTIER_OPTION)


def _property(index: int, **overrides: Any) -> Dict[str, Any]:
    prop = {
        "type": "hotel",
        "name": f"Harbor View Hotel {index}",
        "description": "Modern rooms near the waterfront.",
        "link": f"https://www.harborview{index}.example.com/",
        "property_token": f"ChkIu9HdwK3B-PROPERTY-{index:03d}",
        "serpapi_property_details_link": "https://serpapi.com/search.json?engine=google_hotels&property_token=...",
        "gps_coordinates": {"latitude": 37.78, "longitude": -122.41},
        "check_in_time": "3:00 PM",
        "check_out_time": "11:00 AM",
        "rate_per_night": {"lowest": f"${150 + index}", "extracted_lowest": 150 + index},
        "total_rate": {"lowest": f"${300 + 2 * index}", "extracted_lowest": 300 + 2 * index},
        "hotel_class": "4-star hotel",
        "extracted_hotel_class": 4,
        "overall_rating": 4.2,
        "reviews": 1200 + index,
        "neighborhood": "Fisherman's Wharf",
        "amenities": [
            "Free Wi-Fi",
            "Pool",
            "Fitness centre",
            "Restaurant",
            "Bar",
            "Room service",
            "Air conditioning",
        ],
    }
    prop.update(overrides)
    return prop


class HotelFixtures:
    """Sample google_hotels engine responses."""

    @staticmethod
    def hotels_response(count: int = 12) -> Dict[str, Any]:
        return {
            "search_metadata": {"id": "6661b2f3a1e3c4d5e6f70813", "status": "Success"},
            "search_parameters": {
                "engine": "google_hotels",
                "q": "San Francisco",
                "check_in_date": "2025-06-15",
                "check_out_date": "2025-06-17",
                "adults": 2,
                "currency": "USD",
            },
            "properties": [_property(i) for i in range(count)],
        }

    @staticmethod
    def property(index: int = 0, **overrides: Any) -> Dict[str, Any]:
        return _property(index, **overrides)

    @staticmethod
    def vacation_rentals_response() -> Dict[str, Any]:
        return {
            "search_metadata": {"id": "6661b2f3a1e3c4d5e6f70814", "status": "Success"},
            "search_parameters": {"engine": "google_hotels", "q": "Lake Tahoe vacation rental"},
            "properties": [
                _property(0, type="vacation rental", name="Lakeside Cabin"),
                _property(1, type="vacation rental", name="Pine Retreat", rate_per_night={}),
            ],
        }

    @staticmethod
    def hotel_details_response() -> Dict[str, Any]:
        return {
            "search_metadata": {"id": "6661b2f3a1e3c4d5e6f70815", "status": "Success"},
            "type": "hotel",
            "name": "Harbor View Hotel 0",
            "description": "Modern rooms near the waterfront with bay views.",
            "address": "2500 Mason St, San Francisco, CA 94133",
            "neighborhood": "Fisherman's Wharf",
            "gps_coordinates": {"latitude": 37.78, "longitude": -122.41},
            "check_in_time": "3:00 PM",
            "check_out_time": "11:00 AM",
            "overall_rating": 4.2,
            "reviews": 1200,
            "rates": [
                {"source": f"Site {i}", "rate": f"${150 + i}", "total": f"${300 + i}"}
                for i in range(8)
            ],
            "amenities": [f"Amenity {i}" for i in range(20)],
            "images": (
                [{"thumbnail": f"https://img.example.com/thumb{i}.jpg"} for i in range(8)]
                + [{"link": f"https://img.example.com/full{i}.jpg"} for i in range(4)]
            ),
            "rooms": [{"name": f"Room type {i}"} for i in range(7)],
            "policies": {"cancellation": "Free cancellation until 48h before check-in", "children": "Allowed"},
            "nearby_places": [{"name": f"Place {i}"} for i in range(6)],
        }


class ErrorScenarioFixtures:
    """Malformed and partial payloads the simplifiers must survive."""

    MALFORMED_FLIGHT_PAYLOADS: List[Any] = [
        None,
        [],
        "not a dict",
        {},
        {"best_flights": None, "other_flights": None},
        {"best_flights": "oops"},
        {"best_flights": [{}], "search_metadata": None},
        {"best_flights": [{"flights": None, "price": "n/a", "total_duration": None}]},
        {"best_flights": [{"flights": [{"departure_airport": None, "arrival_airport": 7}]}]},
        {"other_flights": [{"carbon_emissions": {"difference_percent": "low"}}]},
    ]

    MALFORMED_HOTEL_PAYLOADS: List[Any] = [
        None,
        42,
        {},
        {"properties": None},
        {"properties": [{}]},
        {"properties": [{"rate_per_night": None, "total_rate": "cheap", "amenities": None}]},
        {"properties": [{"name": None, "overall_rating": "great", "reviews": "many"}]},
    ]
