"""Calendar dates with day arithmetic and three-way comparison."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

_MESES_31 = frozenset({1, 3, 5, 7, 8, 10, 12})
_MESES_30 = frozenset({4, 6, 9, 11})


def es_bisiesto(anio: int) -> bool:
    """Return True if ``anio`` is a Gregorian leap year."""
    return (anio % 4 == 0 and anio % 100 != 0) or anio % 400 == 0


def dias_mes(mes: int, anio: int) -> int:
    """Return the number of days of ``mes`` in ``anio``, or 0 for an invalid month."""
    if mes in _MESES_31:
        return 31
    if mes in _MESES_30:
        return 30
    if mes == 2:
        return 29 if es_bisiesto(anio) else 28
    return 0


@total_ordering
@dataclass
class Fecha:
    """A mutable date given as day, month and year."""

    dia: int
    mes: int
    anio: int

    def aumentar(self, dias: int) -> None:
        """Move the date forward by ``dias`` days, in place."""
        self.dia += dias
        while self.dia > dias_mes(self.mes, self.anio):
            self.dia -= dias_mes(self.mes, self.anio)
            self.mes += 1
            if self.mes > 12:
                self.mes = 1
                self.anio += 1

    def comparar(self, otra: Fecha) -> int:
        """Return 1 if this date is later than ``otra``, -1 if earlier, 0 if equal."""
        propia = (self.anio, self.mes, self.dia)
        ajena = (otra.anio, otra.mes, otra.dia)
        return (propia > ajena) - (propia < ajena)

    def __lt__(self, otra: object) -> bool:
        if not isinstance(otra, Fecha):
            return NotImplemented
        return self.comparar(otra) < 0

    def __str__(self) -> str:
        return f"{self.dia}/{self.mes}/{self.anio}"