"""
Utilidades de fechas y horas usadas por las reglas de reservas.
"""
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Tuple, Union

# Fuente de tiempo inyectable: los servicios reciben un Clock para que los
# tests puedan fijar el instante actual.
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Instante actual en UTC (aware)."""
    return datetime.now(timezone.utc)


def add_months(value: Union[date, datetime], months: int) -> Union[date, datetime]:
    """
    Avanza `value` un número de meses de calendario.

    Si el mes destino tiene menos días que el día de `value`, los días
    sobrantes pasan al mes siguiente en lugar de recortarse al último día:
    2024-02-29 + 12 meses -> 2025-03-01, 2023-01-31 + 1 mes -> 2023-03-03.
    La hora y la zona horaria se conservan.

    Args:
        value: fecha o datetime de partida
        months: número de meses a sumar (puede ser negativo)

    Returns:
        Mismo tipo que `value`, desplazado
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    first_of_month = value.replace(year=year, month=month, day=1)
    return first_of_month + timedelta(days=value.day - 1)


def day_bounds(value: Union[date, datetime]) -> Tuple[datetime, datetime]:
    """
    Devuelve el rango [inicio_del_día, inicio_del_día_siguiente) de `value`.

    Para un datetime aware se conserva su tzinfo.
    """
    if isinstance(value, datetime):
        start = value.replace(hour=0, minute=0, second=0, microsecond=0)
    else:
        start = datetime.combine(value, time.min)
    return start, start + timedelta(days=1)


def end_of_day(value: Union[date, datetime]) -> datetime:
    """Último instante representable del día de `value`."""
    start, next_day = day_bounds(value)
    return next_day - timedelta(microseconds=1)


def time_to_minutes(value: str) -> int:
    """Convierte "HH:MM" en minutos desde la medianoche."""
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def normalize_hhmm(value: str) -> str:
    """Rellena con ceros una hora "H:MM" para que la comparación léxica sea válida."""
    hours, minutes = value.split(":")
    return f"{int(hours):02d}:{int(minutes):02d}"


def hourly_slots(start_hour: int, end_hour: int) -> list:
    """Etiquetas "HH:00" desde start_hour hasta end_hour, ambos incluidos."""
    return [f"{hour:02d}:00" for hour in range(start_hour, end_hour + 1)]
