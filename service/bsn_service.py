"""
Servicio de BSN: validación de números recibidos y generación por lotes.
Centraliza la lógica de negocio para mantener los endpoints limpios.

La generación verifica cada número con las DOS convenciones de la prueba del
once (la del generador y la del validador) y reporta cualquier divergencia.
"""
import logging
import random
from typing import Dict, List, Optional

from fastapi import HTTPException

from funcs.constantes import MAX_CANTIDAD_BSN
from funcs.elfproef.generador_bsn import generar_bsn, verificar_convencion_generador
from funcs.elfproef.validador_elfproef import validar_elfproef

logger = logging.getLogger(__name__)


def validar_numero(numero: str) -> Dict:
    """
    Valida un número con la prueba del once.

    Un número mal formado no es un error: se responde con valido=False.
    """
    valido = validar_elfproef(numero)
    logger.debug("Validación elfproef de %r: %s", numero, valido)
    return {
        'numero': numero,
        'valido': valido
    }


def generar_lote(cantidad: int, rng: Optional[random.Random] = None) -> Dict:
    """
    Genera `cantidad` BSN y los verifica con ambas convenciones.

    Args:
        cantidad: Número de BSN a generar (1..MAX_CANTIDAD_BSN)
        rng: Fuente aleatoria opcional, compartida por todo el lote

    Returns:
        Diccionario con:
        - cantidad: cantidad generada
        - bsn: lista de números generados
        - divergencias: números que una de las dos convenciones rechaza

    Raises:
        HTTPException: 400 si la cantidad está fuera de rango
    """
    try:
        _validar_cantidad(cantidad)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    rng = rng if rng is not None else random.Random()
    generados: List[str] = []
    divergencias: List[str] = []

    for _ in range(cantidad):
        numero = generar_bsn(rng)
        generados.append(numero)
        if not (verificar_convencion_generador(numero) and validar_elfproef(numero)):
            logger.error(
                "Divergencia entre convenciones elfproef para %s "
                "(generador=%s, validador=%s)",
                numero,
                verificar_convencion_generador(numero),
                validar_elfproef(numero),
            )
            divergencias.append(numero)

    logger.info("Generados %d BSN (%d divergencias)", len(generados), len(divergencias))
    return {
        'cantidad': len(generados),
        'bsn': generados,
        'divergencias': divergencias
    }


def _validar_cantidad(cantidad: int) -> None:
    if isinstance(cantidad, bool) or not isinstance(cantidad, int):
        raise ValueError("La cantidad debe ser un número entero")
    if not 1 <= cantidad <= MAX_CANTIDAD_BSN:
        raise ValueError(f"La cantidad debe estar entre 1 y {MAX_CANTIDAD_BSN}, se recibió {cantidad}")
