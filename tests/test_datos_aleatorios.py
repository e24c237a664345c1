"""Tests for funcs.datos_aleatorios.

Invariants:
    - Ranges are inclusive on both ends
    - A seeded rng makes every generator reproducible
"""

import random
import re
from datetime import datetime, timezone

import pytest

from funcs.constantes import CARACTERES_ALFANUMERICOS
from funcs.datos_aleatorios import (
    crear_documento,
    crear_frase,
    crear_palabra,
    crear_parrafo,
    generar_cadena_aleatoria,
    generar_entero_aleatorio,
    generar_fecha_aleatoria,
    generar_guid,
    generar_lista_enteros,
)


def test_entero_en_rango_inclusivo(rng):
    valores = {generar_entero_aleatorio(1, 3, rng) for _ in range(500)}
    assert valores == {1, 2, 3}


def test_entero_rango_invertido():
    with pytest.raises(ValueError):
        generar_entero_aleatorio(5, 1)


def test_cadena_aleatoria(rng):
    cadena = generar_cadena_aleatoria(32, rng)
    assert len(cadena) == 32
    assert all(c in CARACTERES_ALFANUMERICOS for c in cadena)
    assert generar_cadena_aleatoria(0, rng) == ""


def test_lista_enteros(rng):
    lista = generar_lista_enteros(10, -2, 2, rng)
    assert len(lista) == 10
    assert all(-2 <= v <= 2 for v in lista)


def test_fecha_aleatoria_naive(rng):
    inicio = datetime(2024, 1, 1)
    fin = datetime(2024, 12, 31)
    for _ in range(50):
        fecha = generar_fecha_aleatoria(inicio, fin, rng)
        assert fecha.tzinfo is None
        assert inicio <= fecha <= fin


def test_fecha_aleatoria_aware(rng):
    inicio = datetime(2024, 1, 1, tzinfo=timezone.utc)
    fin = datetime(2024, 1, 2, tzinfo=timezone.utc)
    fecha = generar_fecha_aleatoria(inicio, fin, rng)
    assert inicio <= fecha <= fin


def test_fecha_aleatoria_invalida():
    with pytest.raises(ValueError):
        generar_fecha_aleatoria("no", "2024-01-01")


def test_guid_formato(rng):
    assert re.fullmatch(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", generar_guid(rng))


def test_palabra_longitud(rng):
    for _ in range(100):
        assert 5 <= len(crear_palabra(rng)) <= 10


def test_frase_parrafo_documento(rng):
    assert len(crear_frase(4, rng).split(" ")) == 4
    assert len(crear_parrafo(3, 2, rng).split(". ")) == 3
    assert len(crear_documento(5, 1, 1, rng).split("\n")) == 5


def test_reproducible_con_semilla():
    assert crear_documento(2, 2, 2, random.Random(1)) == crear_documento(2, 2, 2, random.Random(1))
