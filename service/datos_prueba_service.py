"""
Servicio para generar documentos de texto de relleno destinados a sembrar
datos de prueba.
"""
import logging
import random
from typing import Dict, Optional

from fastapi import HTTPException

from funcs.constantes import MAX_FRASES, MAX_PALABRAS, MAX_PARRAFOS
from funcs.datos_aleatorios import crear_documento

logger = logging.getLogger(__name__)

LIMITES = {
    'parrafos': MAX_PARRAFOS,
    'frases': MAX_FRASES,
    'palabras': MAX_PALABRAS,
}


def generar_documento_prueba(
    parrafos: int,
    frases: int,
    palabras: int,
    rng: Optional[random.Random] = None
) -> Dict:
    """
    Genera un documento aleatorio de `parrafos` párrafos, cada uno con `frases`
    frases de `palabras` palabras.

    Raises:
        HTTPException: 400 si algún parámetro está fuera de rango
    """
    try:
        _validar_dimensiones(parrafos=parrafos, frases=frases, palabras=palabras)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    documento = crear_documento(parrafos, frases, palabras, rng)
    logger.info(
        "Documento de prueba generado: %d párrafos, %d frases, %d palabras",
        parrafos, frases, palabras
    )
    return {
        'documento': documento,
        'parrafos': parrafos,
        'frases': frases,
        'palabras': palabras
    }


def _validar_dimensiones(**dimensiones: int) -> None:
    for nombre, valor in dimensiones.items():
        if isinstance(valor, bool) or not isinstance(valor, int):
            raise ValueError(f"'{nombre}' debe ser un número entero")
        limite = LIMITES[nombre]
        if not 1 <= valor <= limite:
            raise ValueError(f"'{nombre}' debe estar entre 1 y {limite}, se recibió {valor}")
