"""
Utilidades de fecha: conversión unix, formato YYYY-MM-DD, comparaciones,
suma/resta de días y ventanas "ahora + X días".
Las comparaciones "por día" ignoran la hora.
"""
import math
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

FechaEntrada = Union[datetime, date, str, int, float]


def a_datetime(valor: FechaEntrada) -> Optional[datetime]:
    """
    Convierte la entrada a datetime.
    - datetime: se devuelve tal cual
    - date: medianoche de ese día
    - int/float: segundos unix (UTC)
    - str: formato ISO 8601 (datetime.fromisoformat)

    Returns:
        datetime o None si la entrada no es interpretable
    """
    if isinstance(valor, datetime):
        return valor
    if isinstance(valor, date):
        return datetime(valor.year, valor.month, valor.day)
    if isinstance(valor, bool):
        return None
    if isinstance(valor, (int, float)):
        try:
            return unix_a_fecha(valor)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(valor, str):
        try:
            return datetime.fromisoformat(valor.strip())
        except ValueError:
            return None
    return None


def ahora_para(fecha: datetime) -> datetime:
    """'Ahora' comparable con `fecha` (aware si la fecha lo es, naive si no)."""
    if fecha.tzinfo is not None:
        return datetime.now(fecha.tzinfo)
    return datetime.now()


def a_aware(fecha: datetime) -> datetime:
    """Naive se interpreta como hora local; aware se devuelve tal cual."""
    if fecha.tzinfo is None:
        return fecha.astimezone()
    return fecha


def unix_a_fecha(segundos: Union[int, float]) -> datetime:
    return datetime.fromtimestamp(segundos, tz=timezone.utc)


def fecha_a_unix(fecha: datetime) -> int:
    if not isinstance(fecha, datetime):
        raise ValueError("Se esperaba un datetime")
    return math.floor(fecha.timestamp())


def formatear_fecha(valor: FechaEntrada) -> str:
    fecha = a_datetime(valor)
    if fecha is None:
        return ''
    return fecha.strftime('%Y-%m-%d')


def es_anterior(fecha_a: FechaEntrada, fecha_b: FechaEntrada) -> bool:
    a, b = a_datetime(fecha_a), a_datetime(fecha_b)
    if a is None or b is None:
        return False
    return a_aware(a) < a_aware(b)


def es_posterior(fecha_a: FechaEntrada, fecha_b: FechaEntrada) -> bool:
    a, b = a_datetime(fecha_a), a_datetime(fecha_b)
    if a is None or b is None:
        return False
    return a_aware(a) > a_aware(b)


def son_fechas_iguales(fecha_a: FechaEntrada, fecha_b: FechaEntrada) -> bool:
    """True si ambas fechas caen en el mismo día calendario."""
    a, b = a_datetime(fecha_a), a_datetime(fecha_b)
    if a is None or b is None:
        return False
    return a.date() == b.date()


def sumar_dias(fecha: datetime, dias: int) -> datetime:
    return fecha + timedelta(days=dias)


def restar_dias(fecha: datetime, dias: int) -> datetime:
    return fecha - timedelta(days=dias)


def _ahora_mas(fecha: datetime, dias: int) -> datetime:
    return sumar_dias(ahora_para(fecha), dias)


# Las ventanas "ahora + X días" comparan el instante completo, no el día
def es_menor_ahora_mas_dias(fecha: datetime, dias: int) -> bool:
    return fecha < _ahora_mas(fecha, dias)


def es_menor_igual_ahora_mas_dias(fecha: datetime, dias: int) -> bool:
    return fecha <= _ahora_mas(fecha, dias)


def es_mayor_ahora_mas_dias(fecha: datetime, dias: int) -> bool:
    return fecha > _ahora_mas(fecha, dias)


def es_mayor_igual_ahora_mas_dias(fecha: datetime, dias: int) -> bool:
    return fecha >= _ahora_mas(fecha, dias)


def es_igual_ahora_mas_dias(fecha: datetime, dias: int) -> bool:
    return fecha == _ahora_mas(fecha, dias)


def es_posterior_ignorando_hora(fecha_a: FechaEntrada, fecha_b: FechaEntrada) -> bool:
    """True si fecha_a cae en un día calendario posterior al de fecha_b."""
    a, b = a_datetime(fecha_a), a_datetime(fecha_b)
    if a is None or b is None:
        return False
    return a.date() > b.date()


def diferencia_dias(fecha_a: datetime, fecha_b: datetime) -> int:
    """
    Días calendario entre dos fechas (fecha_a - fecha_b), ignorando la hora.
    Negativo si fecha_a es anterior a fecha_b.
    """
    return (fecha_a.date() - fecha_b.date()).days


def max_dias_entre_fechas(mas_reciente: datetime, mas_antigua: datetime, limite_dias: int) -> bool:
    """
    Verifica que entre dos fechas no haya más de `limite_dias` días.

    Args:
        mas_reciente: Fecha más nueva
        mas_antigua: Fecha más antigua
        limite_dias: Máximo de días permitido

    Returns:
        True si la diferencia (en días calendario) no supera el límite
    """
    return (mas_reciente.date() - mas_antigua.date()).days <= limite_dias
