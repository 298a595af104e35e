"""Token reader over a text stream, following scanf-style conventions."""

from __future__ import annotations

from typing import Callable, TextIO

from mercado.fecha import Fecha

MAX_LINEA = 256
_DIGITOS = frozenset("0123456789")


class Lector:
    """Reads naturals, integers, words, dates and lines from a text stream."""

    def __init__(self, entrada: TextIO) -> None:
        self._entrada = entrada
        self._pendientes: list[str] = []

    def _leer(self) -> str:
        if self._pendientes:
            return self._pendientes.pop()
        return self._entrada.read(1)

    def _devolver(self, caracter: str) -> None:
        if caracter:
            self._pendientes.append(caracter)

    def _mirar(self) -> str:
        caracter = self._leer()
        self._devolver(caracter)
        return caracter

    def _saltar_blancos(self) -> str:
        while True:
            caracter = self._leer()
            if not caracter.isspace():
                self._devolver(caracter)
                return caracter

    def _tomar_mientras(self, condicion: Callable[[str], bool]) -> str:
        partes = []
        while True:
            caracter = self._leer()
            if not caracter or not condicion(caracter):
                self._devolver(caracter)
                return "".join(partes)
            partes.append(caracter)

    def _digitos(self) -> str:
        return self._tomar_mientras(lambda c: c in _DIGITOS)

    def _signo(self) -> str:
        if self._mirar() in ("+", "-"):
            return self._leer()
        return ""

    def _inicio_token(self, tipo: str) -> None:
        if self._saltar_blancos() == "":
            raise EOFError(f"fin de entrada al leer {tipo}")

    def leer_nat(self) -> int:
        """Read a non-negative integer."""
        self._inicio_token("un natural")
        digitos = self._digitos()
        if not digitos:
            raise ValueError(f"se esperaba un natural, se encontró {self._mirar()!r}")
        return int(digitos)

    def leer_int(self) -> int:
        """Read a signed integer."""
        self._inicio_token("un entero")
        signo = self._signo()
        digitos = self._digitos()
        if not digitos:
            self._devolver(signo)
            raise ValueError(f"se esperaba un entero, se encontró {self._mirar()!r}")
        return int(signo + digitos)

    def leer_char(self) -> str:
        """Read the next non-blank character."""
        self._inicio_token("un carácter")
        return self._leer()

    def leer_double(self) -> float:
        """Read a decimal number with optional fraction and exponent."""
        self._inicio_token("un real")
        signo = self._signo()
        entera = self._digitos()
        fraccion = ""
        punto = ""
        if self._mirar() == ".":
            punto = self._leer()
            fraccion = self._digitos()
        if not entera and not fraccion:
            self._devolver(punto)
            self._devolver(signo)
            raise ValueError(f"se esperaba un real, se encontró {self._mirar()!r}")
        exponente = ""
        if self._mirar() in ("e", "E"):
            marca = self._leer()
            signo_exp = self._signo()
            digitos_exp = self._digitos()
            if digitos_exp:
                exponente = marca + signo_exp + digitos_exp
            else:
                self._devolver(signo_exp)
                self._devolver(marca)
        return float(signo + entera + punto + fraccion + exponente)

    def leer_palabra(self) -> str:
        """Read a run of non-blank characters."""
        self._inicio_token("una palabra")
        return self._tomar_mientras(lambda c: not c.isspace())

    def leer_resto_linea(self) -> str:
        """Read up to, but not including, the next newline."""
        return self._tomar_mientras(lambda c: c != "\n")

    def consumir_resto_linea(self) -> None:
        """Consume one following character if it is blank."""
        caracter = self._leer()
        if caracter and not caracter.isspace():
            self._devolver(caracter)

    def descartar_linea(self) -> str:
        """Consume and return the rest of the line, newline included, up to MAX_LINEA characters."""
        partes = []
        while len(partes) < MAX_LINEA:
            caracter = self._leer()
            if not caracter:
                break
            partes.append(caracter)
            if caracter == "\n":
                break
        return "".join(partes)

    def _esperar(self, literal: str) -> None:
        caracter = self._leer()
        if caracter != literal:
            self._devolver(caracter)
            raise ValueError(f"se esperaba {literal!r}, se encontró {caracter!r}")

    def leer_fecha(self) -> Fecha:
        """Read a date written as ``dd/mm/aaaa``."""
        dia = self.leer_nat()
        self._esperar("/")
        mes = self.leer_nat()
        self._esperar("/")
        anio = self.leer_nat()
        return Fecha(dia, mes, anio)