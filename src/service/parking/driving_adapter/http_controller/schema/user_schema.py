from decimal import Decimal

from pydantic import BaseModel


class UserResponse(BaseModel):
    username: str
    setting_location: str
    setting_site: str
    balance: Decimal

    class Config:
        json_schema_extra = {
            'example': {
                'username': 'alice',
                'setting_location': 'stirling',
                'setting_site': 'ONE',
                'balance': '-2.50',
            }
        }


class ParkingSessionResponse(BaseModel):
    username: str
    location: str
    site: str
    status: str
    price: Decimal
    balance: Decimal
    available: int

    class Config:
        json_schema_extra = {
            'example': {
                'username': 'alice',
                'location': 'stirling',
                'site': 'ONE',
                'status': 'active',
                'price': '2.50',
                'balance': '-2.50',
                'available': 99,
            }
        }
