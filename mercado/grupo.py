"""A bounded group of people kept in birth-date order."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Iterator

from mercado.fecha import Fecha
from mercado.persona import Persona

MAX_PERSONAS = 100


def _fecha_de(persona: Persona) -> Fecha:
    return persona.fecha


class Grupo:
    """People ordered by birth date, earliest first.

    People sharing a birth date are kept newest-added first. The group holds
    at most ``MAX_PERSONAS`` people; further additions are ignored.
    """

    def __init__(self) -> None:
        self._personas: list[Persona] = []

    def agregar(self, persona: Persona) -> None:
        """Insert ``persona`` in birth-date order, unless the group is full."""
        if len(self._personas) >= MAX_PERSONAS:
            return
        posicion = bisect_left(self._personas, persona.fecha, key=_fecha_de)
        self._personas.insert(posicion, persona)

    def __iter__(self) -> Iterator[Persona]:
        return iter(self._personas)

    def __len__(self) -> int:
        return len(self._personas)

    def esta(self, cedula: int) -> bool:
        """Return True if someone in the group has id number ``cedula``."""
        return any(persona.cedula == cedula for persona in self._personas)

    def remover(self, cedula: int) -> None:
        """Remove the person with id number ``cedula``; do nothing if absent."""
        for posicion, persona in enumerate(self._personas):
            if persona.cedula == cedula:
                del self._personas[posicion]
                return

    def hay_personas_fecha(self, fecha: Fecha) -> bool:
        """Return True if at least one person was born on ``fecha`` (binary search)."""
        posicion = bisect_left(self._personas, fecha, key=_fecha_de)
        return (
            posicion < len(self._personas)
            and self._personas[posicion].fecha.comparar(fecha) == 0
        )

    def personas_fecha(self, fecha: Fecha) -> list[Persona]:
        """Return the people born on ``fecha``, in group order."""
        inicio = bisect_left(self._personas, fecha, key=_fecha_de)
        fin = bisect_right(self._personas, fecha, key=_fecha_de)
        return self._personas[inicio:fin]

    def formatear(self) -> str:
        """Return every person's description, one after another."""
        return "\n".join(persona.formatear() for persona in self._personas)