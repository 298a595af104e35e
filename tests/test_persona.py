import pytest

from mercado.fecha import Fecha
from mercado.persona import MAX_APELLIDO, MAX_NOMBRE, Persona


def test_formatear():
    persona = Persona(1234567, "Ana", "Perez", Fecha(5, 6, 1990))
    assert persona.formatear() == "Persona Ana Perez\nCedula: 1234567\nFecha de nacimiento: 5/6/1990"


def test_es_mas_joven_later_birth():
    mayor = Persona(1, "Luis", "Gomez", Fecha(1, 1, 1980))
    menor = Persona(2, "Eva", "Diaz", Fecha(2, 1, 1980))
    assert menor.es_mas_joven(mayor) is True
    assert mayor.es_mas_joven(menor) is False


def test_es_mas_joven_same_date_is_false_both_ways():
    a = Persona(1, "Luis", "Gomez", Fecha(9, 9, 2000))
    b = Persona(2, "Eva", "Diaz", Fecha(9, 9, 2000))
    assert a.es_mas_joven(b) is False
    assert b.es_mas_joven(a) is False


def test_fecha_reflects_changes():
    fecha = Fecha(10, 10, 2010)
    persona = Persona(3, "Sol", "Ruiz", fecha)
    otra = Persona(4, "Mar", "Vega", Fecha(10, 10, 2010))
    fecha.aumentar(1)
    assert persona.es_mas_joven(otra) is True


def test_nombre_too_long():
    with pytest.raises(ValueError):
        Persona(1, "a" * MAX_NOMBRE, "b", Fecha(1, 1, 2000))


def test_apellido_too_long():
    with pytest.raises(ValueError):
        Persona(1, "a", "b" * MAX_APELLIDO, Fecha(1, 1, 2000))


def test_longest_allowed_names_accepted():
    persona = Persona(1, "a" * (MAX_NOMBRE - 1), "b" * (MAX_APELLIDO - 1), Fecha(1, 1, 2000))
    assert len(persona.nombre) == MAX_NOMBRE - 1
    assert len(persona.apellido) == MAX_APELLIDO - 1