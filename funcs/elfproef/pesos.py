"""
Utilidades compartidas de la prueba del once (elfproef): conversión de cadena a
dígitos, vectores de pesos y suma ponderada.

Para un identificador de longitud n, el peso de la posición i (1-indexada desde
la izquierda) es n - i + 1, salvo la última posición, que pesa -1:

    n = 9  ->  9, 8, 7, 6, 5, 4, 3, 2, -1
    n = 8  ->  8, 7, 6, 5, 4, 3, 2, -1
    n = 7  ->  7, 6, 5, 4, 3, 2, -1
"""
from typing import List, Sequence

from funcs.constantes import PESO_DIGITO_CONTROL, PESOS_GENERADOR


def digitos(cadena: str) -> List[int]:
    """
    Convierte una cadena de dígitos ASCII en la lista de sus valores.

    Raises:
        ValueError: Si algún carácter no es un dígito 0-9
    """
    resultado = []
    for caracter in cadena:
        if caracter not in '0123456789':
            raise ValueError(f"Carácter no numérico: {caracter!r}")
        resultado.append(ord(caracter) - ord('0'))
    return resultado


def peso_en_posicion(longitud: int, pos: int) -> int:
    """Peso del dígito en la posición 0-indexada `pos` de un número de `longitud` dígitos."""
    if pos == longitud - 1:
        return PESO_DIGITO_CONTROL
    return longitud - pos


def pesos_elfproef(longitud: int) -> List[int]:
    return [peso_en_posicion(longitud, pos) for pos in range(longitud)]


def suma_ponderada(valores: Sequence[int], pesos: Sequence[int]) -> int:
    if len(valores) != len(pesos):
        raise ValueError(
            f"Cantidad de dígitos ({len(valores)}) distinta de la de pesos ({len(pesos)})"
        )
    return sum(valor * peso for valor, peso in zip(valores, pesos))


def suma_generador(ocho_digitos: Sequence[int]) -> int:
    """Suma ponderada del generador: pesos fijos 9..2 sobre los 8 primeros dígitos."""
    return suma_ponderada(ocho_digitos, PESOS_GENERADOR)
