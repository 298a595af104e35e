"""A shopping cart holding products in increasing id order."""

from __future__ import annotations

from bisect import bisect_right
from typing import Iterator, Optional

from mercado.producto import Producto


def _id_de(producto: Producto) -> int:
    return producto.id


class CarritoProductos:
    """Products kept sorted by id, smallest first."""

    def __init__(self) -> None:
        self._productos: list[Producto] = []

    def insertar(self, producto: Producto) -> None:
        """Insert ``producto`` keeping the cart ordered by id."""
        posicion = bisect_right(self._productos, producto.id, key=_id_de)
        self._productos.insert(posicion, producto)

    def __iter__(self) -> Iterator[Producto]:
        return iter(self._productos)

    def __len__(self) -> int:
        return len(self._productos)

    def es_vacio(self) -> bool:
        """Return True if the cart holds no products."""
        return not self._productos

    def existe(self, id_producto: int) -> bool:
        """Return True if a product with ``id_producto`` is in the cart."""
        return any(producto.id == id_producto for producto in self._productos)

    def obtener(self, id_producto: int) -> Optional[Producto]:
        """Return the product with ``id_producto``, or None if absent."""
        return next(
            (producto for producto in self._productos if producto.id == id_producto),
            None,
        )

    def remover(self, id_producto: int) -> None:
        """Remove the product with ``id_producto``; do nothing if absent."""
        for posicion, producto in enumerate(self._productos):
            if producto.id == id_producto:
                del self._productos[posicion]
                return

    def formatear(self) -> str:
        """Return every product's description in id order."""
        return "\n".join(producto.formatear() for producto in self._productos)