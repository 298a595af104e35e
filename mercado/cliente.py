"""Store customers with an id, a name, a last name and an age."""

from __future__ import annotations

from dataclasses import dataclass, replace

MAX_NOMBRE = 100
MAX_APELLIDO = 100


@dataclass
class Cliente:
    """A customer identified by ``id``."""

    id: int
    nombre: str
    apellido: str
    edad: int

    def __post_init__(self) -> None:
        if len(self.nombre) >= MAX_NOMBRE:
            raise ValueError(f"el nombre supera {MAX_NOMBRE - 1} caracteres")
        if len(self.apellido) >= MAX_APELLIDO:
            raise ValueError(f"el apellido supera {MAX_APELLIDO - 1} caracteres")

    def copiar(self) -> Cliente:
        """Return an independent copy of this customer."""
        return replace(self)

    def formatear(self) -> str:
        """Return the three-line description of the customer."""
        return (
            f"Cliente {self.nombre} {self.apellido}\n"
            f"Id: {self.id}\n"
            f"Edad: {self.edad}"
        )