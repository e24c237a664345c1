"""
Router de FastAPI que expone la validación (prueba del once / elfproef) y la
generación de BSN de 9 dígitos para formularios y scripts de carga de datos.
"""
from fastapi import APIRouter, Body, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from service.bsn_service import generar_lote, validar_numero

#---------------------------------------------------------- Router
router = APIRouter(tags=["BSN — Validación y generación (elfproef)"])

# ---------------------------------------------------------- Post - Validar un número con la prueba del once
# Modelo para la entrada del endpoint /validar_bsn
class NumeroPayload(BaseModel):
    numero: str = Field(..., description="Número a validar (7 a 9 dígitos, sin separadores)")

@router.post("/validar_bsn", summary="Valida un número con la prueba del once")
async def validar_bsn(
    payload: NumeroPayload = Body(..., description="JSON con la clave 'numero' a validar")
):
    """
    Valida un BSN (o número parcial de 7/8 dígitos) con la prueba del once.

    Un número con letras, separadores, espacios o longitud incorrecta no es un
    error: se responde `valido: false`.
    """
    return JSONResponse(validar_numero(payload.numero))

# ---------------------------------------------------------- Get - Generar BSN válidos
@router.get("/generar_bsn", summary="Genera BSN de 9 dígitos válidos")
async def generar_bsn_lote(
    cantidad: int = Query(1, description="Cantidad de BSN a generar")
):
    """
    Genera uno o varios BSN que cumplen la prueba del once.

    Cada número se verifica con la convención del generador y con la del
    validador; si alguna lo rechazara aparecería en `divergencias`.
    """
    return JSONResponse(generar_lote(cantidad))
