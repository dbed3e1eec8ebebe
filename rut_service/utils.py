# rut_service/utils.py

import re
from typing import Optional

RUT_LARGO_MINIMO = 8
_DIGITOS = "0123456789"
_MILES_RE = re.compile(r"(\d)(?=(\d{3})+(?!\d))", re.ASCII)


def calcular_dv(cuerpo: str) -> Optional[str]:
    """
    Calcula el dígito verificador (módulo 11) de un cuerpo de RUT.
    Devuelve None si el cuerpo tiene caracteres que no son dígitos.
    """
    suma = 0
    multiplo = 2
    for d in reversed(cuerpo):
        if d not in _DIGITOS:
            return None
        suma += int(d) * multiplo
        multiplo = 2 if multiplo == 7 else multiplo + 1

    resto = 11 - (suma % 11)
    return "0" if resto == 11 else "K" if resto == 10 else str(resto)


def validar_rut(rut: Optional[str]) -> bool:
    """
    Valida un RUT chileno con su dígito verificador.
    Un RUT vacío se considera válido (campo opcional).
    """
    if not rut: return True
    rut = rut.replace(".", "").replace("-", "").upper()
    if len(rut) < RUT_LARGO_MINIMO: return False
    cuerpo, dv = rut[:-1], rut[-1]

    return dv == calcular_dv(cuerpo)


def formatear_rut(rut: Optional[str]) -> str:
    """Formatea un RUT con puntos y guión: '123456785' -> '12.345.678-5'. No valida."""
    # solo se quita el primer guión
    valor = (rut or "").replace(".", "").replace("-", "", 1)
    if len(valor) <= 1:
        return valor
    cuerpo, dv = valor[:-1], valor[-1].upper()
    return _MILES_RE.sub(r"\1.", cuerpo) + "-" + dv


def limpiar_rut(rut: Optional[str]) -> str:
    """Deja el RUT como CUERPO-DV, sin puntos ni espacios. No valida."""
    if not rut:
        return ""
    valor = re.sub(r"[.\-\s]", "", rut).upper()
    if len(valor) <= 1:
        return valor
    return f"{valor[:-1]}-{valor[-1]}"
