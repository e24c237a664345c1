"""
Generador de BSN de 9 dígitos que cumplen la prueba del once, sin reintentos
ni búsqueda por fuerza bruta.

Convención propia del generador (distinta de la del validador):
    - 8 dígitos aleatorios en [1, 9]
    - suma ponderada con pesos fijos 9..2
    - dígito de control = suma % 11, añadido como 9º dígito
    - resto 10: se perturba una única vez el 8º dígito
"""
import logging
import random
from typing import Optional, Sequence

from funcs.constantes import (
    DIGITO_ALEATORIO_MAX,
    DIGITO_ALEATORIO_MIN,
    LONGITUD_BSN,
    MODULO_ELFPROEF,
    PESOS_GENERADOR,
)
from funcs.datos_aleatorios import generar_entero_aleatorio
from funcs.elfproef.pesos import digitos, suma_generador

logger = logging.getLogger(__name__)

RESTO_SIN_DIGITO = 10
DIGITO_CONTROL_RESERVA = 0


def _perturbar_octavo_digito(digito: int) -> int:
    # 9 baja a 8 para no producir 10
    return 8 if digito == 9 else digito + 1


def completar_bsn(ocho_digitos: Sequence[int]) -> str:
    """
    Calcula el dígito de control para 8 dígitos dados y devuelve el BSN completo.

    Si el resto es 10 (ningún dígito 0-9 lo satisface) se perturba el 8º dígito
    (+1, o 9 -> 8) y se recalcula la suma completa. Si el resto siguiera siendo
    10, el dígito de control se fuerza a 0; no hay segundo intento.

    Args:
        ocho_digitos: Secuencia de exactamente 8 enteros en [0, 9]

    Returns:
        String de 9 dígitos

    Raises:
        ValueError: Si la entrada no son 8 enteros en [0, 9]
    """
    valores = list(ocho_digitos)
    if len(valores) != len(PESOS_GENERADOR):
        raise ValueError(f"Se esperaban {len(PESOS_GENERADOR)} dígitos, se recibieron {len(valores)}")
    for valor in valores:
        if isinstance(valor, bool) or not isinstance(valor, int) or not 0 <= valor <= 9:
            raise ValueError(f"Dígito inválido: {valor!r}")

    resto = suma_generador(valores) % MODULO_ELFPROEF

    if resto == RESTO_SIN_DIGITO:
        anterior = valores[-1]
        valores[-1] = _perturbar_octavo_digito(anterior)
        resto = suma_generador(valores) % MODULO_ELFPROEF
        logger.debug(
            "Resto 10: 8º dígito %d -> %d, nuevo resto %d", anterior, valores[-1], resto
        )
        if resto == RESTO_SIN_DIGITO:
            resto = DIGITO_CONTROL_RESERVA

    return ''.join(str(valor) for valor in valores) + str(resto)


def generar_bsn(rng: Optional[random.Random] = None) -> str:
    """
    Genera un BSN de 9 dígitos válido.

    Args:
        rng: Fuente aleatoria opcional (p. ej. random.Random(semilla) en tests).
             Si se omite, se usa una instancia local por llamada.
    """
    rng = rng if rng is not None else random.Random()
    ocho_digitos = [
        generar_entero_aleatorio(DIGITO_ALEATORIO_MIN, DIGITO_ALEATORIO_MAX, rng)
        for _ in PESOS_GENERADOR
    ]
    return completar_bsn(ocho_digitos)


def verificar_convencion_generador(numero: str) -> bool:
    """
    Regla del generador para 9 dígitos: la suma ponderada (9..2) de los 8
    primeros dígitos módulo 11 debe ser igual al 9º dígito.
    """
    if not isinstance(numero, str) or len(numero) != LONGITUD_BSN:
        return False
    try:
        valores = digitos(numero)
    except ValueError:
        return False
    return suma_generador(valores[:-1]) % MODULO_ELFPROEF == valores[-1]
