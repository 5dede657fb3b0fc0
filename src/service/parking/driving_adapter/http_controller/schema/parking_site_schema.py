from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel


class ParkingSiteResponse(BaseModel):
    location: str
    site: str
    capacity: int
    available: int
    latitude: float
    longitude: float
    price: Decimal

    class Config:
        json_schema_extra = {
            'example': {
                'location': 'stirling',
                'site': 'ONE',
                'capacity': 100,
                'available': 100,
                'latitude': 0.0,
                'longitude': 0.0,
                'price': '2.50',
            }
        }


class AvailabilityResponse(BaseModel):
    location: str
    site: str
    available: int
    released: Optional[bool] = None  # Only set by release: False when already at capacity


class SchemaResponse(BaseModel):
    tables: List[str]
