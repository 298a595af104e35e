import pytest

from mercado.fecha import Fecha
from mercado.grupo import MAX_PERSONAS, Grupo
from mercado.persona import Persona


def _persona(cedula, dia, mes, anio, nombre="Ana", apellido="Perez"):
    return Persona(cedula, nombre, apellido, Fecha(dia, mes, anio))


def _cedulas(grupo):
    return [persona.cedula for persona in grupo]


def test_empty_group():
    grupo = Grupo()
    assert len(grupo) == 0
    assert list(grupo) == []
    assert grupo.formatear() == ""


def test_agregar_orders_by_birth_date():
    grupo = Grupo()
    grupo.agregar(_persona(1, 1, 1, 2000))
    grupo.agregar(_persona(2, 1, 1, 1990))
    grupo.agregar(_persona(3, 1, 1, 2010))
    grupo.agregar(_persona(4, 15, 6, 2000))
    assert _cedulas(grupo) == [2, 1, 4, 3]
    assert len(grupo) == 4


def test_same_date_newest_first():
    grupo = Grupo()
    grupo.agregar(_persona(1, 3, 3, 1995))
    grupo.agregar(_persona(2, 3, 3, 1995))
    grupo.agregar(_persona(3, 3, 3, 1995))
    assert _cedulas(grupo) == [3, 2, 1]


def test_full_group_ignores_additions():
    grupo = Grupo()
    for cedula in range(MAX_PERSONAS):
        grupo.agregar(_persona(cedula, 1, 1, 1950 + cedula))
    grupo.agregar(_persona(9999, 1, 1, 1900))
    assert len(grupo) == MAX_PERSONAS
    assert not grupo.esta(9999)


def test_esta():
    grupo = Grupo()
    grupo.agregar(_persona(10, 1, 1, 2000))
    assert grupo.esta(10)
    assert not grupo.esta(11)


def test_remover_keeps_order():
    grupo = Grupo()
    grupo.agregar(_persona(1, 1, 1, 2000))
    grupo.agregar(_persona(2, 1, 1, 1990))
    grupo.agregar(_persona(3, 1, 1, 2010))
    grupo.remover(1)
    assert _cedulas(grupo) == [2, 3]
    assert not grupo.esta(1)


def test_remover_absent_has_no_effect():
    grupo = Grupo()
    grupo.agregar(_persona(1, 1, 1, 2000))
    grupo.remover(42)
    assert _cedulas(grupo) == [1]


def test_remover_on_empty_group():
    grupo = Grupo()
    grupo.remover(1)
    assert len(grupo) == 0


def test_hay_personas_fecha():
    grupo = Grupo()
    assert not grupo.hay_personas_fecha(Fecha(1, 1, 2000))
    grupo.agregar(_persona(1, 1, 1, 2000))
    grupo.agregar(_persona(2, 5, 7, 1985))
    grupo.agregar(_persona(3, 9, 9, 2020))
    assert grupo.hay_personas_fecha(Fecha(5, 7, 1985))
    assert grupo.hay_personas_fecha(Fecha(9, 9, 2020))
    assert not grupo.hay_personas_fecha(Fecha(6, 7, 1985))
    assert not grupo.hay_personas_fecha(Fecha(1, 1, 2030))


def test_personas_fecha_returns_matches_in_order():
    grupo = Grupo()
    grupo.agregar(_persona(1, 2, 2, 2002))
    grupo.agregar(_persona(2, 1, 1, 1999))
    grupo.agregar(_persona(3, 2, 2, 2002))
    resultado = grupo.personas_fecha(Fecha(2, 2, 2002))
    assert [persona.cedula for persona in resultado] == [3, 1]
    assert grupo.personas_fecha(Fecha(3, 3, 2003)) == []


def test_formatear_joins_people():
    grupo = Grupo()
    ana = _persona(1, 1, 1, 2000, "Ana", "Perez")
    luis = _persona(2, 1, 1, 1980, "Luis", "Gomez")
    grupo.agregar(ana)
    grupo.agregar(luis)
    assert grupo.formatear() == luis.formatear() + "\n" + ana.formatear()


@pytest.mark.parametrize("anios", [[2000], [2000, 1990], [1990, 2000, 1995, 1980]])
def test_iteration_is_sorted(anios):
    grupo = Grupo()
    for cedula, anio in enumerate(anios):
        grupo.agregar(_persona(cedula, 1, 1, anio))
    fechas = [persona.fecha for persona in grupo]
    assert fechas == sorted(fechas)