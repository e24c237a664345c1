"""Tests for funcs.texto."""

from funcs.texto import (
    capitalizar_primera,
    codificar_utf8,
    decodificar_utf8,
    longitud_utf8,
    quitar_diacriticos,
    recortar_seguro,
)


def test_recortar_seguro():
    assert recortar_seguro("  hola ") == "hola"
    assert recortar_seguro(None) == ""
    assert recortar_seguro(12) == ""


def test_capitalizar_primera():
    assert capitalizar_primera("elfproef") == "Elfproef"
    assert capitalizar_primera("") == ""


def test_utf8():
    datos = codificar_utf8("Ñandú")
    assert datos == b"\xc3\x91and\xc3\xba"
    assert decodificar_utf8(datos) == "Ñandú"
    assert longitud_utf8("Ñandú") == 7


def test_quitar_diacriticos():
    assert quitar_diacriticos("Ærø café Ñuñoa çà") == "Ærø cafe Nunoa ca"
    assert quitar_diacriticos("sin cambios") == "sin cambios"
