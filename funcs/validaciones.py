"""
Validaciones genéricas de valores: cadenas, números, listas, fechas y diccionarios.
Ninguna función lanza excepciones por entradas mal formadas: devuelven False.
"""
import math
import re
from typing import Any, Dict, Iterable

from funcs.constantes import VALORES_INVALIDOS
from funcs.fechas import a_datetime, ahora_para
from funcs.texto import longitud_utf8

_AUSENTE = object()


def es_cadena_no_vacia(valor: Any) -> bool:
    return isinstance(valor, str) and valor.strip() != ''


def es_invalido(valor: Any) -> bool:
    """None o las cadenas 'undefined' / 'null' se consideran sin valor."""
    return valor is None or (isinstance(valor, str) and valor in VALORES_INVALIDOS)


def es_cadena_valida(valor: Any) -> bool:
    return not es_invalido(valor) and es_cadena_no_vacia(valor)


def es_numero_valido(valor: Any) -> bool:
    # bool es subclase de int: se excluye explícitamente
    if isinstance(valor, bool) or not isinstance(valor, (int, float)):
        return False
    return math.isfinite(valor)


def es_lista_valida(valor: Any) -> bool:
    return isinstance(valor, (list, tuple)) and len(valor) > 0


def es_fecha_valida(valor: Any) -> bool:
    return a_datetime(valor) is not None


def es_fecha_futura(valor: Any) -> bool:
    fecha = a_datetime(valor)
    if fecha is None:
        return False
    return fecha > ahora_para(fecha)


def es_fecha_pasada(valor: Any) -> bool:
    fecha = a_datetime(valor)
    if fecha is None:
        return False
    return fecha < ahora_para(fecha)


def tiene_campos_requeridos(obj: Any, campos: Iterable[str]) -> bool:
    """
    Verifica que un diccionario contenga todas las claves indicadas
    y que ninguna tenga valor None.
    """
    if not isinstance(obj, dict):
        return False
    return all(campo in obj and obj[campo] is not None for campo in campos)


def comparar_diccionarios(dic_a: Dict[str, Any], dic_b: Dict[str, Any]) -> Dict[str, bool]:
    """
    Compara recursivamente dos diccionarios clave por clave.

    Las claves anidadas se devuelven en notación con puntos, p. ej.
    {'direccion.ciudad': True, 'edad': False}. Una clave presente en un solo
    lado nunca es igual (ni siquiera si el otro lado vale None).

    Args:
        dic_a: Primer diccionario
        dic_b: Segundo diccionario

    Returns:
        Diccionario con True/False por cada clave hoja
    """
    resultado: Dict[str, bool] = {}

    def comparar_claves(a: Dict[str, Any], b: Dict[str, Any], prefijo: str = '') -> None:
        a = a or {}
        b = b or {}
        # Orden estable: primero las claves de a, luego las nuevas de b
        claves = list(a.keys()) + [k for k in b.keys() if k not in a]
        for clave in claves:
            clave_completa = f"{prefijo}.{clave}" if prefijo else clave
            val_a = a.get(clave, _AUSENTE)
            val_b = b.get(clave, _AUSENTE)
            if isinstance(val_a, dict) and isinstance(val_b, dict):
                comparar_claves(val_a, val_b, clave_completa)
            else:
                resultado[clave_completa] = val_a == val_b

    comparar_claves(dic_a, dic_b)
    return resultado


def tiene_valor(valor: Any) -> bool:
    return valor is not None


def tiene_valor_cadena(valor: Any) -> bool:
    return tiene_valor(valor) and valor != ''


def coincide_exacto(patron: str, texto: Any) -> bool:
    """
    True si la expresión regular cubre el texto COMPLETO (no una subcadena).
    Valores que no son string devuelven False.
    """
    if not isinstance(texto, str):
        return False
    return re.fullmatch(patron, texto) is not None


def longitud_en_rango(texto: Any, minimo: int, maximo: int) -> bool:
    """
    Verifica que la longitud del texto esté entre `minimo` y `maximo` (inclusive).
    Un texto sin valor ('' o None) solo es aceptable cuando minimo <= 0.
    """
    if not tiene_valor_cadena(texto):
        return minimo <= 0
    return minimo <= len(texto) <= maximo


def longitud_maxima_utf8(texto: str, maximo: Any) -> bool:
    """
    True si el texto, codificado en UTF-8, no supera `maximo` bytes.
    Un máximo que no es número válido cuenta como 0.
    """
    if not es_numero_valido(maximo):
        maximo = 0
    return longitud_utf8(texto) <= maximo


def tiene_valor_par(par: Any) -> bool:
    """True si el par nombre/valor existe y su 'value' no es None ni ''."""
    if not isinstance(par, dict):
        return False
    return tiene_valor_cadena(par.get('value'))
