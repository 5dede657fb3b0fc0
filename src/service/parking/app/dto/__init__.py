from src.service.parking.app.dto.operation_results import (
    AuthResult,
    ChargeResult,
    RegistrationResult,
    ReleaseResult,
    ReservationResult,
)

__all__ = [
    'AuthResult',
    'ChargeResult',
    'RegistrationResult',
    'ReleaseResult',
    'ReservationResult',
]
