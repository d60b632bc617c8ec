"""Static airport reference data served as the mcp://airports resource."""

import json
from typing import Dict, List

AIRPORTS: List[Dict[str, str]] = [
    {"id": "JFK", "name": "John F. Kennedy International", "city": "New York", "country": "USA"},
    {"id": "LAX", "name": "Los Angeles International", "city": "Los Angeles", "country": "USA"},
    {"id": "ORD", "name": "O'Hare International", "city": "Chicago", "country": "USA"},
    {"id": "SFO", "name": "San Francisco International", "city": "San Francisco", "country": "USA"},
    {"id": "MIA", "name": "Miami International", "city": "Miami", "country": "USA"},
    {"id": "LHR", "name": "Heathrow", "city": "London", "country": "UK"},
    {"id": "CDG", "name": "Charles de Gaulle", "city": "Paris", "country": "France"},
    {"id": "DXB", "name": "Dubai International", "city": "Dubai", "country": "UAE"},
    {"id": "NRT", "name": "Narita International", "city": "Tokyo", "country": "Japan"},
    {"id": "SYD", "name": "Sydney Airport", "city": "Sydney", "country": "Australia"},
]


def airports_json() -> str:
    return json.dumps(AIRPORTS, indent=2)
