import io

import pytest

from mercado.consola_grupo import ConsolaGrupo, main

EXITO_PERSONA = "Persona creada de forma exitosa.\n"
EXITO_AGREGAR = "Se ha agregado la persona al grupo de forma exitosa.\n"


def _ejecutar(texto):
    salida = io.StringIO()
    ConsolaGrupo(io.StringIO(texto), salida).ejecutar()
    return salida.getvalue()


def test_fin_only():
    assert _ejecutar("Fin\n") == "1>Fin.\n"


def test_end_of_input_stops():
    assert _ejecutar("") == "1>"


def test_comment_keeps_leading_space():
    assert _ejecutar("# hola mundo\nFin\n") == "1>#  hola mundo.\n2>Fin.\n"


def test_unknown_command():
    assert _ejecutar("volar 1 2 3\nFin\n") == "1>Comando no reconocido.\n2>Fin.\n"


def test_crear_e_imprimir_fecha():
    assert _ejecutar("crearFecha 1/2/2000\nimprimirFecha\nFin\n") == "1>2>1/2/2000\n3>Fin.\n"


def test_aumentar_dias():
    salida = _ejecutar("crearFecha 28/2/2001\naumentarDias 1\nFin\n")
    assert salida == "1>2>La nueva fecha aplazada 1 dias es: 1/3/2001\n3>Fin.\n"


@pytest.mark.parametrize(
    "fechas, mensaje",
    [
        ("1/1/2000 1/1/2000", "Las fechas son iguales. \n"),
        ("2/1/2000 1/1/2000", "La primera fecha es posterior a la segunda. \n"),
        ("1/1/1999 1/1/2000", "La primera fecha es anterior a la segunda. \n"),
    ],
)
def test_comparar_fechas(fechas, mensaje):
    assert _ejecutar(f"compararFechas {fechas}\nFin\n") == f"1>{mensaje}2>Fin.\n"


def test_liberar_fecha_allows_new_one():
    salida = _ejecutar("crearFecha 1/1/2000\nliberarFecha\ncrearFecha 3/4/2005\nimprimirFecha\nFin\n")
    assert salida == "1>2>3>4>3/4/2005\n5>Fin.\n"


def test_persona_commands():
    texto = (
        "crearFecha 5/6/1990\n"
        "crearPersona 111 Ana Perez\n"
        "imprimirCiPersona\n"
        "imprimirFechaPersona\n"
        "imprimirNombreYApellidoPersona\n"
        "imprimirPersona\n"
        "Fin\n"
    )
    esperado = (
        "1>2>" + EXITO_PERSONA
        + "3>La ci de la persona es: 111\n"
        + "4>La fecha de nacimiento de la persona es: 5/6/1990\n"
        + "5>El nombre de la persona es: Ana\nEl apellido de la persona es: Perez\n"
        + "6>Persona Ana Perez\nCedula: 111\nFecha de nacimiento: 5/6/1990\n"
        + "7>Fin.\n"
    )
    assert _ejecutar(texto) == esperado


def test_es_mas_joven_persona():
    texto = (
        "crearFecha 1/1/2000\n"
        "crearPersona 1 Ana Perez\n"
        "esMasJovenPersona 1/1/1990 2 Beto Diaz\n"
        "esMasJovenPersona 1/1/2010 3 Carla Ruiz\n"
        "Fin\n"
    )
    esperado = (
        "1>2>" + EXITO_PERSONA
        + "3>" + EXITO_PERSONA + "Ana tiene menor edad que Beto\n"
        + "4>" + EXITO_PERSONA + "Ana tiene mayor edad que Carla\n"
        + "5>Fin.\n"
    )
    assert _ejecutar(texto) == esperado


def test_grupo_flow():
    texto = (
        "crearGrupo\n"
        "crearFecha 5/6/1990\n"
        "crearPersona 111 Ana Perez\n"
        "agregarAGrupo\n"
        "crearFecha 1/1/1980\n"
        "crearPersona 222 Luis Gomez\n"
        "agregarAGrupo\n"
        "imprimirGrupo\n"
        "estaEnGrupo 111\n"
        "removerDeGrupo 222\n"
        "estaEnGrupo 222\n"
        "removerDeGrupo 222\n"
        "liberarGrupo\n"
        "Fin\n"
    )
    esperado = (
        "1>El grupo ha sido creado de forma exitosa.\n"
        "2>3>" + EXITO_PERSONA + "4>" + EXITO_AGREGAR
        + "5>6>" + EXITO_PERSONA + "7>" + EXITO_AGREGAR
        + "8>Persona Luis Gomez\nCedula: 222\nFecha de nacimiento: 1/1/1980\n"
        + "Persona Ana Perez\nCedula: 111\nFecha de nacimiento: 5/6/1990\n"
        + "9>La persona con ci 111 está en el grupo.\n"
        + "10>La persona con ci 222 se removió del grupo.\n"
        + "11>La persona con ci 222 NO está en el grupo.\n"
        + "12>La persona con ci 222 NO está en el grupo.\n"
        + "13>Se ha borrado el grupo en forma exitosa.\n"
        + "14>Fin.\n"
    )
    assert _ejecutar(texto) == esperado


def test_personas_por_fecha():
    texto = (
        "crearGrupo\n"
        "crearFecha 5/6/1990\n"
        "crearPersona 111 Ana Perez\n"
        "agregarAGrupo\n"
        "hayPersonasFecha 5/6/1990\n"
        "hayPersonasFecha 6/6/1990\n"
        "imprimirPersonasFecha 5/6/1990\n"
        "imprimirPersonasFecha 6/6/1990\n"
        "Fin\n"
    )
    esperado = (
        "1>El grupo ha sido creado de forma exitosa.\n"
        "2>3>" + EXITO_PERSONA + "4>" + EXITO_AGREGAR
        + "5>Se encontraron personas en la fecha determinada.\n"
        + "6>No se encontraron personas en la fecha determinada.\n"
        + "7>Persona Ana Perez\nCedula: 111\nFecha de nacimiento: 5/6/1990\n"
        + "8>9>Fin.\n"
    )
    assert _ejecutar(texto) == esperado


def test_liberar_grupo_without_grupo_prints_nothing():
    assert _ejecutar("liberarGrupo\nFin\n") == "1>2>Fin.\n"


def test_state_after_agregar():
    consola = ConsolaGrupo(
        io.StringIO("crearGrupo\ncrearFecha 1/1/2000\ncrearPersona 7 Ana Perez\nagregarAGrupo\nFin\n"),
        io.StringIO(),
    )
    consola.ejecutar()
    assert consola.persona is None
    assert consola.fecha is None
    assert [persona.cedula for persona in consola.grupo] == [7]


@pytest.mark.parametrize(
    "texto",
    [
        "imprimirFecha\n",
        "aumentarDias 3\n",
        "crearPersona 1 Ana Perez\n",
        "imprimirPersona\n",
        "imprimirGrupo\n",
        "crearGrupo\ncrearGrupo\n",
        "crearFecha 1/1/2000\ncrearFecha 2/2/2000\n",
    ],
)
def test_invalid_state_raises(texto):
    with pytest.raises(RuntimeError):
        _ejecutar(texto + "Fin\n")


def test_main_reads_file(tmp_path, capsys):
    archivo = tmp_path / "comandos.txt"
    archivo.write_text("crearFecha 9/9/1999\nimprimirFecha\nFin\n", encoding="utf-8")
    assert main([str(archivo)]) == 0
    assert capsys.readouterr().out == "1>2>9/9/1999\n3>Fin.\n"