"""Products with an id, a name, a price and the date they were stocked."""

from __future__ import annotations

from dataclasses import dataclass

from mercado.fecha import Fecha

MAX_NOMBRE_PRODUCTO = 100


@dataclass
class Producto:
    """A product identified by ``id``."""

    id: int
    nombre: str
    precio: int
    fecha_ingreso: Fecha

    def __post_init__(self) -> None:
        if len(self.nombre) >= MAX_NOMBRE_PRODUCTO:
            raise ValueError(
                f"el nombre del producto supera {MAX_NOMBRE_PRODUCTO - 1} caracteres"
            )

    def formatear(self) -> str:
        """Return the four-line description of the product."""
        return (
            f"Producto: {self.id}\n"
            f"{self.nombre}\n"
            f"Precio: {self.precio}\n"
            f"Ingresado el: {self.fecha_ingreso}"
        )