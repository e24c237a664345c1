"""
Inicializa la aplicación FastAPI y monta los routers que exponen la validación y
generación de BSN (prueba del once) y la generación de datos de prueba.
"""
from fastapi import FastAPI
from routes.bsn_routes import router as bsn_router
from routes.datos_prueba_routes import router as datos_prueba_router

app = FastAPI(title="API: Validación y generación de BSN (elfproef) y datos de prueba")

# Routers de nuestros endpoints
app.include_router(bsn_router, prefix="/api")
app.include_router(datos_prueba_router, prefix="/api")

@app.get("/")
def read_root():
    return {"Hello": "World"}
