"""Tool argument models for the Google Travels MCP server."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CabinClass = Literal["economy", "premium_economy", "business", "first"]

PropertyType = Literal["house", "apartment", "condo", "villa", "cabin", "any"]


class FlightLeg(BaseModel):
    """One leg of a multi-city itinerary."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "origin": "JFK",
                "destination": "CDG",
                "departureDate": "2025-06-15"
            }
        }
    )

    origin: str = Field(..., description="Departure airport code")
    destination: str = Field(..., description="Arrival airport code")
    departureDate: str = Field(..., description="Departure date in YYYY-MM-DD format")
