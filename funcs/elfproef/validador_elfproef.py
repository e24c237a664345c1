"""
Validador de la prueba del once (elfproef) para identificadores de 7 a 9 dígitos.

Para el número ABCDEFGHI debe cumplirse:
    (9xA)+(8xB)+(7xC)+(6xD)+(5xE)+(4xF)+(3xG)+(2xH)+(-1xI) divisible por 11
Para 7 u 8 dígitos los pesos empiezan en la longitud del número.
El identificador formado solo por ceros se rechaza aunque sea divisible por 11.
"""
from funcs.constantes import MODULO_ELFPROEF, PATRON_BSN
from funcs.elfproef.pesos import peso_en_posicion
from funcs.validaciones import coincide_exacto


def validar_elfproef(candidato: str) -> bool:
    """
    Valida un identificador con la prueba del once.
    - Solo dígitos 0-9, longitud 7, 8 o 9 (sin espacios ni separadores)
    - Suma ponderada divisible por 11
    - No todo ceros

    Cualquier entrada mal formada devuelve False; nunca lanza excepciones.

    Examples:
        >>> validar_elfproef("123456782")
        True
        >>> validar_elfproef("123456789")
        False
    """
    if not coincide_exacto(PATRON_BSN, candidato):
        return False

    longitud = len(candidato)
    suma = 0
    resultado = 0
    # Una sola pasada: suma de dígitos (chequeo de ceros) y suma ponderada
    for pos, caracter in enumerate(candidato):
        digito = int(caracter)
        suma += digito
        resultado += peso_en_posicion(longitud, pos) * digito

    # % en Python es no negativo para divisor positivo
    return suma != 0 and resultado % MODULO_ELFPROEF == 0
