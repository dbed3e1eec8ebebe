# rut_service/main.py
"""
Servicio HTTP de validación y formato de RUT.

Para levantarlo: uvicorn rut_service.main:app --reload
"""
import logging
import os

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

load_dotenv(override=True) # Cargar .env primero y forzar sobrescritura

from rut_service.models import (
    RutRequest,
    RutValidacion,
    RutFormateado,
    DigitoVerificador,
    MatriculaRequest,
    MatriculaValidada,
)
from rut_service.utils import validar_rut, formatear_rut, limpiar_rut, calcular_dv

# --- CONFIGURACIÓN ---

def nivel_log(nombre: str) -> int:
    """Nivel de logging a partir de su nombre; INFO si el nombre no existe."""
    nivel = logging.getLevelName(nombre.strip().upper())
    return nivel if isinstance(nivel, int) else logging.INFO

def origenes_cors(valor: str) -> list:
    return [o.strip() for o in valor.split(",") if o.strip()]

LOG_LEVEL = nivel_log(os.environ.get("LOG_LEVEL", "INFO"))
CORS_ORIGINS = origenes_cors(os.environ.get("CORS_ORIGINS", "http://localhost:5173"))

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Servicio de RUT - Gestión Escolar", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.get("/", tags=["Status"])
def root(): return {"message": "Servicio de RUT funcionando 🚀"}


# --- RUT ---

@app.post("/rut/validar", response_model=RutValidacion, tags=["RUT"])
def validar(data: RutRequest):
    return RutValidacion(
        rut=data.rut,
        valido=validar_rut(data.rut),
        formateado=formatear_rut(data.rut),
        limpio=limpiar_rut(data.rut),
    )

@app.post("/rut/formatear", response_model=RutFormateado, tags=["RUT"])
def formatear(data: RutRequest):
    return RutFormateado(rut=data.rut, formateado=formatear_rut(data.rut))

@app.get("/rut/{cuerpo}/dv", response_model=DigitoVerificador, tags=["RUT"])
def digito_verificador(cuerpo: str):
    """Calcula el DV esperado para un cuerpo de RUT (se aceptan puntos)."""
    cuerpo = cuerpo.replace(".", "")
    dv = calcular_dv(cuerpo) if cuerpo else None
    if dv is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="RUT inválido.")
    return DigitoVerificador(cuerpo=cuerpo, dv=dv)


# --- MATRÍCULAS ---

@app.post("/matriculas/validar", response_model=MatriculaValidada, tags=["Matrículas"])
def validar_matricula(data: MatriculaRequest):
    """
    Revisa los datos de un alumno nuevo (y su apoderado, si viene) antes de matricular.
    Devuelve los mismos datos con los RUT formateados.
    """
    estudiante = data.estudiante
    if not estudiante.nombres.strip() or not estudiante.rut.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                            detail="Por favor complete el nombre y RUT del alumno.")
    if not validar_rut(estudiante.rut):
        logger.warning("Matrícula rechazada: RUT de alumno inválido (%s)", estudiante.rut)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="El RUT del alumno no es válido.")

    apoderado = data.apoderado
    rut_apoderado = apoderado.rut if apoderado else None
    if rut_apoderado:
        # se valida tal cual viene, sin recortar espacios
        if not validar_rut(rut_apoderado):
            logger.warning("Matrícula rechazada: RUT de apoderado inválido (%s)", apoderado.rut)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="El RUT del apoderado no es válido.")

    estudiante = estudiante.model_copy(update={"rut": formatear_rut(estudiante.rut)})
    if apoderado:
        apoderado = apoderado.model_copy(update={"rut": formatear_rut(rut_apoderado) if rut_apoderado else None})

    logger.info("Matrícula validada para RUT %s", estudiante.rut)
    return MatriculaValidada(estudiante=estudiante, apoderado=apoderado)
