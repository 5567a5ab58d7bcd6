# Schemas package
from .equipment import EquipmentResponse, EquipmentWrite, ErrorResponse
from .health import HealthResponse

__all__ = [
    "EquipmentResponse",
    "EquipmentWrite",
    "ErrorResponse",
    "HealthResponse",
]
