"""Tests for funcs.conversiones.

Invariants:
    - Empty input converts to None instead of raising
    - A name/value pair is a dict with 'name' and 'value' keys
"""

import pytest

from funcs.conversiones import (
    cero_a_none,
    crear_par,
    numero_a_texto,
    par_a_numero,
    par_a_valor,
    texto_a_numero,
)


# -- texto y números ----------------------------------------------------------

def test_texto_a_numero():
    assert texto_a_numero("12") == 12
    assert isinstance(texto_a_numero("12"), int)
    assert texto_a_numero("1.5") == 1.5
    assert texto_a_numero("0") == 0
    assert texto_a_numero("") is None
    assert texto_a_numero(None) is None


def test_texto_a_numero_no_numerico():
    with pytest.raises(ValueError):
        texto_a_numero("doce")


def test_numero_a_texto():
    assert numero_a_texto(42) == "42"
    assert numero_a_texto(2.5) == "2.5"
    assert numero_a_texto(0) is None
    assert numero_a_texto(None) is None


def test_cero_a_none():
    assert cero_a_none(0) is None
    assert cero_a_none(0.0) is None
    assert cero_a_none(7) == 7
    assert cero_a_none(None) is None
    assert cero_a_none(False) is False


# -- pares nombre/valor -------------------------------------------------------

def test_crear_par():
    assert crear_par(15, "edad") == {"value": "15", "name": "edad"}
    assert crear_par(None, "edad") == {"value": "", "name": "edad"}


def test_par_a_valor():
    assert par_a_valor({"name": "bsn", "value": "111222333"}) == "111222333"
    assert par_a_valor({"name": "bsn", "value": ""}) is None
    assert par_a_valor({"name": "bsn", "value": None}) is None
    assert par_a_valor(None) is None


def test_par_a_numero():
    assert par_a_numero(crear_par(15, "edad")) == 15
    assert par_a_numero(crear_par(None, "edad")) is None
