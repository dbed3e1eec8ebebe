# rut_service/models.py
from pydantic import BaseModel, Field
from typing import Optional


class RutRequest(BaseModel):
    rut: str = Field(..., max_length=20)

class RutValidacion(BaseModel):
    rut: str
    valido: bool
    formateado: str
    limpio: str

class RutFormateado(BaseModel):
    rut: str
    formateado: str

class DigitoVerificador(BaseModel):
    cuerpo: str
    dv: str


class EstudianteNuevo(BaseModel):
    nombres: str = Field(..., max_length=100)
    apellidos: str = Field("", max_length=100)
    rut: str = Field(..., max_length=20)
    email: Optional[str] = Field(None, max_length=100)
    grado: Optional[str] = Field(None, max_length=50)
    edad: Optional[int] = Field(None, ge=0)
    direccion: Optional[str] = Field(None, max_length=255)

class ApoderadoNuevo(BaseModel):
    nombre: str = Field(..., max_length=100)
    apellidos: str = Field("", max_length=100)
    rut: Optional[str] = Field(None, max_length=20) # opcional para el apoderado
    correo: Optional[str] = Field(None, max_length=100)
    telefono: Optional[str] = Field(None, max_length=30)
    direccion: Optional[str] = Field(None, max_length=255)
    parentesco: str = Field("Padre", max_length=50)

class MatriculaRequest(BaseModel):
    estudiante: EstudianteNuevo
    apoderado: Optional[ApoderadoNuevo] = None

class MatriculaValidada(BaseModel): # RUTs ya formateados
    estudiante: EstudianteNuevo
    apoderado: Optional[ApoderadoNuevo] = None
