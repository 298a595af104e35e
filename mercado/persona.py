"""People identified by a national id number, with a birth date."""

from __future__ import annotations

from dataclasses import dataclass

from mercado.fecha import Fecha

MAX_NOMBRE = 100
MAX_APELLIDO = 100


@dataclass
class Persona:
    """A person with id number, first name, last name and birth date."""

    cedula: int
    nombre: str
    apellido: str
    fecha: Fecha

    def __post_init__(self) -> None:
        if len(self.nombre) >= MAX_NOMBRE:
            raise ValueError(f"el nombre supera {MAX_NOMBRE - 1} caracteres")
        if len(self.apellido) >= MAX_APELLIDO:
            raise ValueError(f"el apellido supera {MAX_APELLIDO - 1} caracteres")

    def es_mas_joven(self, otra: Persona) -> bool:
        """Return True if this person was born strictly after ``otra``."""
        return self.fecha.comparar(otra.fecha) == 1

    def formatear(self) -> str:
        """Return the three-line description of the person."""
        return (
            f"Persona {self.nombre} {self.apellido}\n"
            f"Cedula: {self.cedula}\n"
            f"Fecha de nacimiento: {self.fecha}"
        )