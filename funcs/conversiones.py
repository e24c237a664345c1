"""
Conversiones entre texto, números y pares nombre/valor.

Un par nombre/valor es un diccionario {'name': str, 'value': str}, la forma en
que los formularios del entorno de procesos entregan sus campos.
"""
from typing import Any, Dict, Optional, Union

Numero = Union[int, float]


def texto_a_numero(texto: Optional[str]) -> Optional[Numero]:
    """
    Convierte un texto a número ('12' -> 12, '1.5' -> 1.5).
    Texto vacío o None devuelve None.

    Raises:
        ValueError: Si el texto no representa un número
    """
    if not texto:
        return None
    try:
        return int(texto)
    except ValueError:
        return float(texto)


def numero_a_texto(numero: Optional[Numero]) -> Optional[str]:
    """0 y None devuelven None; cualquier otro número su representación en texto."""
    if not numero:
        return None
    return str(numero)


def par_a_valor(par: Optional[Dict[str, Any]]) -> Optional[str]:
    if not par or par.get('value') in (None, ''):
        return None
    return par['value']


def par_a_numero(par: Optional[Dict[str, Any]]) -> Optional[Numero]:
    valor = par_a_valor(par)
    if valor is None:
        return None
    return texto_a_numero(str(valor))


def crear_par(valor: Any, nombre: str) -> Dict[str, str]:
    return {
        'value': str(valor) if valor is not None else '',
        'name': nombre
    }


def cero_a_none(numero: Optional[Numero]) -> Optional[Numero]:
    # Evita guardar 0 en campos opcionales del almacén de datos
    if numero == 0 and not isinstance(numero, bool):
        return None
    return numero
