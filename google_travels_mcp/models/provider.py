"""
Narrow views over SerpAPI Google Flights / Google Hotels payloads.

The provider schema is not contractually guaranteed, so every field is optional
and carries its default on the model itself. A field whose value does not match
its declared type falls back to that default instead of failing the whole parse;
a malformed entry in a record list becomes an empty record in its place.
"""

from typing import Annotated, Any, Dict, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

Number = Union[int, float]

ModelT = TypeVar("ModelT", bound="ProviderModel")
ItemT = TypeVar("ItemT")


def _object_items(value: Any) -> Any:
    """Items that are not objects read as empty records, keeping their position."""
    if isinstance(value, list):
        return [item if isinstance(item, Mapping) else {} for item in value]
    return value


def _string_items(value: Any) -> Any:
    if isinstance(value, list):
        return [item for item in value if isinstance(item, str)]
    return value


RecordList = Annotated[List[ItemT], BeforeValidator(_object_items)]
StringList = Annotated[Optional[List[str]], BeforeValidator(_string_items)]


class ProviderModel(BaseModel):
    """Base for provider views: unknown keys ignored, malformed values defaulted."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_malformed(cls, value: Any, handler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            field = cls.model_fields[info.field_name]
            return field.get_default(call_default_factory=True)

    @classmethod
    def parse_lenient(cls: Type[ModelT], payload: Any) -> ModelT:
        """Build a view from arbitrary JSON; anything that is not an object reads as empty."""
        if not isinstance(payload, Mapping):
            payload = {}
        return cls.model_validate(dict(payload))


class RawAirport(ProviderModel):
    name: Optional[str] = None
    id: Optional[str] = None
    time: Optional[str] = None


class RawFlightLeg(ProviderModel):
    departure_airport: RawAirport = Field(default_factory=RawAirport)
    arrival_airport: RawAirport = Field(default_factory=RawAirport)
    airline: Optional[str] = None
    flight_number: Optional[str] = None
    legroom: Optional[str] = None
    travel_class: Optional[str] = None


class RawCarbonEmissions(ProviderModel):
    difference_percent: Optional[Number] = None


class RawFlightOption(ProviderModel):
    flights: RecordList[RawFlightLeg] = Field(default_factory=list)
    total_duration: Optional[Number] = None
    price: Optional[Number] = None
    type: Optional[str] = None
    booking_token: Optional[str] = None
    departure_token: Optional[str] = None
    carbon_emissions: RawCarbonEmissions = Field(default_factory=RawCarbonEmissions)


class RawSearchMetadata(ProviderModel):
    google_flights_url: Optional[str] = None


class RawFlightSearchResult(ProviderModel):
    best_flights: RecordList[RawFlightOption] = Field(default_factory=list)
    other_flights: RecordList[RawFlightOption] = Field(default_factory=list)
    price_insights: Optional[Any] = None
    search_parameters: Optional[Dict[str, Any]] = None
    search_metadata: RawSearchMetadata = Field(default_factory=RawSearchMetadata)


class RawRate(ProviderModel):
    extracted_lowest: Optional[Number] = None


class RawHotelProperty(ProviderModel):
    property_token: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    overall_rating: Optional[Number] = None
    reviews: Optional[int] = None
    rate_per_night: RawRate = Field(default_factory=RawRate)
    total_rate: RawRate = Field(default_factory=RawRate)
    neighborhood: Optional[str] = None
    location: Optional[str] = None
    link: Optional[str] = None
    amenities: StringList = None
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None


class RawHotelSearchResult(ProviderModel):
    properties: RecordList[RawHotelProperty] = Field(default_factory=list)
    search_parameters: Optional[Dict[str, Any]] = None


class RawHotelRate(ProviderModel):
    source: Optional[Any] = None
    rate: Optional[Any] = None
    total: Optional[Any] = None


class RawHotelImage(ProviderModel):
    thumbnail: Optional[str] = None
    link: Optional[str] = None


class RawHotelPolicies(ProviderModel):
    cancellation: Optional[Any] = None
    children: Optional[Any] = None


class RawHotelDetails(ProviderModel):
    name: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    overall_rating: Optional[Number] = None
    reviews: Optional[int] = None
    address: Optional[str] = None
    neighborhood: Optional[str] = None
    gps_coordinates: Optional[Dict[str, Any]] = None
    rates: Optional[RecordList[RawHotelRate]] = None
    amenities: StringList = None
    images: Optional[RecordList[RawHotelImage]] = None
    rooms: Optional[List[Any]] = None
    policies: RawHotelPolicies = Field(default_factory=RawHotelPolicies)
    nearby_places: Optional[List[Any]] = None
