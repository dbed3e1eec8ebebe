import random

import pytest

from rut_service.utils import calcular_dv, formatear_rut, limpiar_rut, validar_rut


# --- validar_rut ---

@pytest.mark.parametrize("rut", ["", None])
def test_validar_rut_vacio_es_valido(rut):
    assert validar_rut(rut) is True


@pytest.mark.parametrize("rut", [
    "12.345.678-5",
    "123456785",
    "12345678-5",
    "1.234.567-4",
    "10.000.013-K",
    "10.000.013-k",
    "10.000.004-0",
])
def test_validar_rut_valido(rut):
    assert validar_rut(rut) is True


def test_validar_rut_dv_incorrecto():
    assert validar_rut("12.345.678-4") is False


def test_validar_rut_es_deterministico():
    resultados = {validar_rut("11.111.111-1") for _ in range(5)}
    assert resultados == {True}


def test_validar_rut_muy_corto():
    # 7 caracteres tras limpiar
    assert validar_rut("123.456-0") is False


@pytest.mark.parametrize("rut", ["12A45678-5", "ABCDEFGH-K", "12.345.678-X", "١٢٣٤٥٦٧٨-5"])
def test_validar_rut_con_basura_no_falla(rut):
    assert validar_rut(rut) is False


def test_validar_rut_quita_todos_los_guiones():
    assert validar_rut("1234-5678-5") is True


# --- calcular_dv ---

def test_calcular_dv():
    assert calcular_dv("12345678") == "5"
    assert calcular_dv("10000013") == "K"
    assert calcular_dv("10000004") == "0"


def test_calcular_dv_cuerpo_no_numerico():
    assert calcular_dv("12a") is None


def test_calcular_dv_cuerpo_vacio():
    assert calcular_dv("") == "0"


# --- formatear_rut ---

def test_formatear_rut():
    assert formatear_rut("123456785") == "12.345.678-5"
    assert formatear_rut("12345678-k") == "12.345.678-K"
    assert formatear_rut("1234567-4") == "1.234.567-4"


def test_formatear_rut_idempotente():
    una_vez = formatear_rut("123456785")
    assert formatear_rut(una_vez) == una_vez


@pytest.mark.parametrize("rut", ["", "5", "-5", "."])
def test_formatear_rut_corto_sin_cambios(rut):
    esperado = rut.replace(".", "").replace("-", "", 1)
    assert formatear_rut(rut) == esperado


def test_formatear_rut_none():
    assert formatear_rut(None) == ""


def test_formatear_rut_solo_quita_el_primer_guion():
    assert formatear_rut("1-2-3") == "12--3"


@pytest.mark.parametrize("largo", range(2, 14))
def test_formatear_rut_cantidad_de_puntos(largo):
    rut = "".join(str(i % 10) for i in range(1, largo + 1))
    cuerpo = formatear_rut(rut).rsplit("-", 1)[0]
    assert cuerpo.count(".") == (largo - 2) // 3


def test_formatear_y_validar_cuerpos_generados():
    rnd = random.Random(2024)
    for _ in range(200):
        cuerpo = str(rnd.randint(1_000_000, 99_999_999))
        rut = cuerpo + calcular_dv(cuerpo)
        assert validar_rut(formatear_rut(rut)) is True


# --- limpiar_rut ---

def test_limpiar_rut():
    assert limpiar_rut("12.345.678-5") == "12345678-5"
    assert limpiar_rut(" 12 345 678 k") == "12345678-K"
    assert limpiar_rut("") == ""
    assert limpiar_rut(None) == ""
    assert limpiar_rut("k") == "K"
