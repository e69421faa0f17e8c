"""
Errores de dominio del sistema de reservas.

Los servicios lanzan estas excepciones; la capa HTTP las traduce a
respuestas con el código de estado correspondiente (ver app/main.py).
"""


class GymBookingError(Exception):
    """Base para todos los errores de negocio."""
    status_code = 500
    error_code = "internal_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(GymBookingError):
    """Raised when a resource is not found (or does not belong to the caller)."""
    status_code = 404
    error_code = "not_found"


class InvalidStateError(GymBookingError):
    """Raised when the resource exists but its state forbids the operation."""
    status_code = 409
    error_code = "invalid_state"


class ConflictError(GymBookingError):
    """Raised when the operation would break a uniqueness or overlap rule."""
    status_code = 409
    error_code = "conflict"


class InvalidInputError(GymBookingError):
    """Raised when supplied values are inconsistent with each other."""
    status_code = 400
    error_code = "invalid_input"


class StoreError(GymBookingError):
    """Fallo del almacenamiento (conexión, restricciones de integridad, etc.)."""
    status_code = 500
    error_code = "store_error"
