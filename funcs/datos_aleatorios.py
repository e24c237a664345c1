"""
Generadores de datos de prueba aleatorios: enteros, cadenas, fechas, guid y
texto de relleno (palabra, frase, párrafo, documento).

Cada función acepta un `rng` (random.Random) opcional. Si se omite, se crea una
instancia local por llamada: no se usa el estado aleatorio global del módulo
`random`, así que las funciones son seguras entre hilos y reproducibles con
una semilla.
"""
import math
import random
from datetime import datetime
from typing import List, Optional

from funcs.constantes import (
    CARACTERES_ALFANUMERICOS,
    LONGITUD_PALABRA_MAX,
    LONGITUD_PALABRA_MIN,
)
from funcs.fechas import FechaEntrada, a_datetime, unix_a_fecha


def _rng_local(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def generar_entero_aleatorio(minimo: int, maximo: int, rng: Optional[random.Random] = None) -> int:
    """Entero uniforme entre minimo y maximo (ambos inclusive)."""
    if minimo > maximo:
        raise ValueError(f"El mínimo ({minimo}) no puede ser mayor que el máximo ({maximo})")
    return _rng_local(rng).randint(minimo, maximo)


def generar_cadena_aleatoria(longitud: int, rng: Optional[random.Random] = None) -> str:
    """Cadena alfanumérica (A-Z, a-z, 0-9) de la longitud indicada."""
    if longitud < 0:
        raise ValueError("La longitud no puede ser negativa")
    rng = _rng_local(rng)
    return ''.join(rng.choice(CARACTERES_ALFANUMERICOS) for _ in range(longitud))


def generar_lista_enteros(
    longitud: int,
    minimo: int,
    maximo: int,
    rng: Optional[random.Random] = None,
) -> List[int]:
    rng = _rng_local(rng)
    return [generar_entero_aleatorio(minimo, maximo, rng) for _ in range(longitud)]


def generar_fecha_aleatoria(
    inicio: FechaEntrada,
    fin: FechaEntrada,
    rng: Optional[random.Random] = None,
) -> datetime:
    """
    Fecha aleatoria entre `inicio` y `fin` (ambas inclusive), con precisión de segundos.

    Raises:
        ValueError: Si alguna fecha no es interpretable o inicio > fin
    """
    fecha_inicio = a_datetime(inicio)
    fecha_fin = a_datetime(fin)
    if fecha_inicio is None or fecha_fin is None:
        raise ValueError("Las fechas de inicio y fin deben ser fechas válidas")

    segundos = generar_entero_aleatorio(
        math.ceil(fecha_inicio.timestamp()),
        math.floor(fecha_fin.timestamp()),
        rng,
    )
    fecha = unix_a_fecha(segundos)
    # Conservar la zona horaria de la entrada (naive si la entrada lo era)
    if fecha_inicio.tzinfo is None:
        return fecha.astimezone().replace(tzinfo=None)
    return fecha.astimezone(fecha_inicio.tzinfo)


def generar_guid(rng: Optional[random.Random] = None) -> str:
    """Guid con formato 8-4-4-4-12 (hexadecimal en minúsculas)."""
    rng = _rng_local(rng)

    def s4() -> str:
        return f"{rng.randint(0, 0xFFFF):04x}"

    return f"{s4()}{s4()}-{s4()}-{s4()}-{s4()}-{s4()}{s4()}{s4()}"


def crear_palabra(rng: Optional[random.Random] = None) -> str:
    rng = _rng_local(rng)
    longitud = generar_entero_aleatorio(LONGITUD_PALABRA_MIN, LONGITUD_PALABRA_MAX, rng)
    return generar_cadena_aleatoria(longitud, rng)


def crear_frase(cantidad_palabras: int, rng: Optional[random.Random] = None) -> str:
    """Palabras separadas por un espacio."""
    rng = _rng_local(rng)
    return ' '.join(crear_palabra(rng) for _ in range(cantidad_palabras))


def crear_parrafo(cantidad_frases: int, cantidad_palabras: int, rng: Optional[random.Random] = None) -> str:
    """Frases separadas por '. '."""
    rng = _rng_local(rng)
    return '. '.join(crear_frase(cantidad_palabras, rng) for _ in range(cantidad_frases))


def crear_documento(
    cantidad_parrafos: int,
    cantidad_frases: int,
    cantidad_palabras: int,
    rng: Optional[random.Random] = None,
) -> str:
    """Párrafos separados por salto de línea."""
    rng = _rng_local(rng)
    return '\n'.join(
        crear_parrafo(cantidad_frases, cantidad_palabras, rng)
        for _ in range(cantidad_parrafos)
    )
