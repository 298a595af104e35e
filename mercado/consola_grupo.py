"""Command interpreter for exercising dates, people and groups."""

from __future__ import annotations

import argparse
import sys
from itertools import count
from typing import Callable, Optional, TextIO, TypeVar

from mercado.fecha import Fecha
from mercado.grupo import Grupo
from mercado.lector import Lector
from mercado.persona import Persona

_T = TypeVar("_T")


def _requerir(valor: Optional[_T], descripcion: str) -> _T:
    if valor is None:
        raise RuntimeError(f"no hay {descripcion} definida")
    return valor


class ConsolaGrupo:
    """Reads commands from ``entrada`` and writes their results to ``salida``."""

    def __init__(self, entrada: TextIO, salida: TextIO) -> None:
        self._lector = Lector(entrada)
        self._salida = salida
        self.fecha: Optional[Fecha] = None
        self.persona: Optional[Persona] = None
        self.grupo: Optional[Grupo] = None
        self._comandos: dict[str, Callable[[], None]] = {
            "#": self._comentario,
            "crearFecha": self._crear_fecha,
            "imprimirFecha": self._imprimir_fecha,
            "liberarFecha": self._liberar_fecha,
            "aumentarDias": self._aumentar_dias,
            "compararFechas": self._comparar_fechas,
            "crearPersona": self._crear_persona,
            "imprimirCiPersona": self._imprimir_ci_persona,
            "imprimirFechaPersona": self._imprimir_fecha_persona,
            "imprimirNombreYApellidoPersona": self._imprimir_nombre_apellido,
            "imprimirPersona": self._imprimir_persona,
            "liberarPersona": self._liberar_persona,
            "esMasJovenPersona": self._es_mas_joven_persona,
            "crearGrupo": self._crear_grupo,
            "agregarAGrupo": self._agregar_a_grupo,
            "imprimirGrupo": self._imprimir_grupo,
            "liberarGrupo": self._liberar_grupo,
            "estaEnGrupo": self._esta_en_grupo,
            "imprimirPersonasFecha": self._imprimir_personas_fecha,
            "hayPersonasFecha": self._hay_personas_fecha,
            "removerDeGrupo": self._remover_de_grupo,
        }

    def _escribir(self, texto: str) -> None:
        self._salida.write(texto)

    def ejecutar(self) -> None:
        """Run commands until ``Fin`` or the end of input."""
        for numero in count(1):
            self._escribir(f"{numero}>")
            try:
                comando = self._lector.leer_palabra()
            except EOFError:
                return
            if comando == "Fin":
                self._escribir("Fin.\n")
                return
            accion = self._comandos.get(comando)
            if accion is None:
                self._escribir("Comando no reconocido.\n")
            else:
                accion()
            self._lector.descartar_linea()

    def _comentario(self) -> None:
        self._escribir(f"# {self._lector.leer_resto_linea()}.\n")

    def _crear_fecha(self) -> None:
        if self.fecha is not None:
            raise RuntimeError("ya hay una fecha definida")
        self.fecha = self._lector.leer_fecha()

    def _imprimir_fecha(self) -> None:
        self._escribir(f"{_requerir(self.fecha, 'fecha')}\n")

    def _liberar_fecha(self) -> None:
        self.fecha = None

    def _aumentar_dias(self) -> None:
        fecha = _requerir(self.fecha, "fecha")
        dias = self._lector.leer_nat()
        fecha.aumentar(dias)
        self._escribir(f"La nueva fecha aplazada {dias} dias es: {fecha}\n")

    def _comparar_fechas(self) -> None:
        primera = self._lector.leer_fecha()
        segunda = self._lector.leer_fecha()
        resultado = primera.comparar(segunda)
        if resultado == 0:
            self._escribir("Las fechas son iguales. \n")
        elif resultado == 1:
            self._escribir("La primera fecha es posterior a la segunda. \n")
        else:
            self._escribir("La primera fecha es anterior a la segunda. \n")

    def _leer_persona(self, nacimiento: Fecha) -> Persona:
        cedula = self._lector.leer_nat()
        nombre = self._lector.leer_palabra()
        apellido = self._lector.leer_palabra()
        persona = Persona(cedula, nombre, apellido, nacimiento)
        self._escribir("Persona creada de forma exitosa.\n")
        return persona

    def _crear_persona(self) -> None:
        if self.persona is not None:
            raise RuntimeError("ya hay una persona definida")
        nacimiento = _requerir(self.fecha, "fecha")
        self.persona = self._leer_persona(nacimiento)
        self.fecha = None

    def _imprimir_ci_persona(self) -> None:
        persona = _requerir(self.persona, "persona")
        self._escribir(f"La ci de la persona es: {persona.cedula}\n")

    def _imprimir_fecha_persona(self) -> None:
        persona = _requerir(self.persona, "persona")
        self._escribir(f"La fecha de nacimiento de la persona es: {persona.fecha}\n")

    def _imprimir_nombre_apellido(self) -> None:
        persona = _requerir(self.persona, "persona")
        self._escribir(f"El nombre de la persona es: {persona.nombre}\n")
        self._escribir(f"El apellido de la persona es: {persona.apellido}\n")

    def _imprimir_persona(self) -> None:
        self._escribir(f"{_requerir(self.persona, 'persona').formatear()}\n")

    def _liberar_persona(self) -> None:
        self.persona = None

    def _es_mas_joven_persona(self) -> None:
        persona = _requerir(self.persona, "persona")
        nacimiento = self._lector.leer_fecha()
        otra = self._leer_persona(nacimiento)
        relacion = "menor" if persona.es_mas_joven(otra) else "mayor"
        self._escribir(f"{persona.nombre} tiene {relacion} edad que {otra.nombre}\n")

    def _crear_grupo(self) -> None:
        if self.grupo is not None:
            raise RuntimeError("ya hay un grupo definido")
        self.grupo = Grupo()
        self._escribir("El grupo ha sido creado de forma exitosa.\n")

    def _agregar_a_grupo(self) -> None:
        grupo = _requerir(self.grupo, "grupo")
        persona = _requerir(self.persona, "persona")
        grupo.agregar(persona)
        self.persona = None
        self._escribir("Se ha agregado la persona al grupo de forma exitosa.\n")

    def _imprimir_grupo(self) -> None:
        grupo = _requerir(self.grupo, "grupo")
        for persona in grupo:
            self._escribir(f"{persona.formatear()}\n")

    def _liberar_grupo(self) -> None:
        if self.grupo is not None:
            self.grupo = None
            self._escribir("Se ha borrado el grupo en forma exitosa.\n")

    def _esta_en_grupo(self) -> None:
        grupo = _requerir(self.grupo, "grupo")
        cedula = self._lector.leer_nat()
        if grupo.esta(cedula):
            self._escribir(f"La persona con ci {cedula} está en el grupo.\n")
        else:
            self._escribir(f"La persona con ci {cedula} NO está en el grupo.\n")

    def _imprimir_personas_fecha(self) -> None:
        grupo = _requerir(self.grupo, "grupo")
        fecha = self._lector.leer_fecha()
        for persona in grupo.personas_fecha(fecha):
            self._escribir(f"{persona.formatear()}\n")

    def _hay_personas_fecha(self) -> None:
        grupo = _requerir(self.grupo, "grupo")
        fecha = self._lector.leer_fecha()
        if grupo.hay_personas_fecha(fecha):
            self._escribir("Se encontraron personas en la fecha determinada.\n")
        else:
            self._escribir("No se encontraron personas en la fecha determinada.\n")

    def _remover_de_grupo(self) -> None:
        grupo = _requerir(self.grupo, "grupo")
        cedula = self._lector.leer_nat()
        if grupo.esta(cedula):
            grupo.remover(cedula)
            self._escribir(f"La persona con ci {cedula} se removió del grupo.\n")
        else:
            self._escribir(f"La persona con ci {cedula} NO está en el grupo.\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the group console over a file or standard input."""
    parser = argparse.ArgumentParser(
        prog="consola-grupo",
        description="Intérprete de comandos para fechas, personas y grupos.",
    )
    parser.add_argument("archivo", nargs="?", help="archivo de comandos (por defecto, la entrada estándar)")
    argumentos = parser.parse_args(argv)
    if argumentos.archivo:
        with open(argumentos.archivo, encoding="utf-8") as entrada:
            ConsolaGrupo(entrada, sys.stdout).ejecutar()
    else:
        ConsolaGrupo(sys.stdin, sys.stdout).ejecutar()
    return 0


if __name__ == "__main__":
    sys.exit(main())