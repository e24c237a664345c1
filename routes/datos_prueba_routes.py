"""
Router de FastAPI para generar texto de relleno aleatorio (datos de prueba).
"""
from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from service.datos_prueba_service import generar_documento_prueba

#---------------------------------------------------------- Router
router = APIRouter(tags=["Datos de prueba"])

# ---------------------------------------------------------- Post - Generar un documento aleatorio
class DocumentoPayload(BaseModel):
    parrafos: int = Field(1, description="Cantidad de párrafos")
    frases: int = Field(1, description="Frases por párrafo")
    palabras: int = Field(5, description="Palabras por frase")

@router.post("/generar_documento_prueba", summary="Genera un documento de texto aleatorio")
async def generar_documento(
    payload: DocumentoPayload = Body(..., description="Dimensiones del documento")
):
    """
    Genera un documento con palabras aleatorias de 5 a 10 caracteres.
    Las frases se separan con '. ' y los párrafos con salto de línea.
    """
    resultado = generar_documento_prueba(payload.parrafos, payload.frases, payload.palabras)
    return JSONResponse(resultado)
