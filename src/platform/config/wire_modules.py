"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.parking.driving_adapter.http_controller import (
    parking_site_controller,
    schema_controller,
    user_controller,
)


WIRE_MODULES: list[ModuleType] = [
    user_controller,
    parking_site_controller,
    schema_controller,
]
