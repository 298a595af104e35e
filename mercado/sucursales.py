"""Branch customer collections ordered by mean customer age."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from mercado.cliente import Cliente
from mercado.clientes_abb import ClientesABB

_ENCABEZADO = "clientesSucursalesLDE de grupos:"


@dataclass
class _Sucursal:
    clientes: ClientesABB
    id_sucursal: int


class ClientesSucursales:
    """Customer trees of several branches, ordered by mean age ascending."""

    def __init__(self) -> None:
        self._sucursales: list[_Sucursal] = []

    def insertar(self, clientes: ClientesABB, id_sucursal: int) -> None:
        """Insert ``clientes`` after every branch with a mean age not above its own."""
        promedio = clientes.edad_promedio()
        posicion = next(
            (
                indice
                for indice, sucursal in enumerate(self._sucursales)
                if promedio < sucursal.clientes.edad_promedio()
            ),
            len(self._sucursales),
        )
        self._sucursales.insert(posicion, _Sucursal(clientes, id_sucursal))

    def __iter__(self) -> Iterator[ClientesABB]:
        return (sucursal.clientes for sucursal in self._sucursales)

    def __reversed__(self) -> Iterator[ClientesABB]:
        return (sucursal.clientes for sucursal in reversed(self._sucursales))

    def __len__(self) -> int:
        return len(self._sucursales)

    def primero(self) -> Optional[ClientesABB]:
        """Return the first customer tree, or None when empty."""
        return self._sucursales[0].clientes if self._sucursales else None

    def obtener_nesimo(self, n: int) -> Optional[ClientesABB]:
        """Return the ``n``-th tree counting from 1, or None if out of range."""
        if n < 1 or n > len(self._sucursales):
            return None
        return self._sucursales[n - 1].clientes

    def remover_ultimo(self) -> ClientesABB:
        """Remove and return the last tree."""
        if not self._sucursales:
            raise IndexError("la lista de sucursales es vacía")
        return self._sucursales.pop().clientes

    def remover_nesimo(self, n: int) -> ClientesABB:
        """Remove and return the ``n``-th tree counting from 1."""
        if n < 1 or n > len(self._sucursales):
            raise IndexError(f"no hay sucursal en la posición {n}")
        return self._sucursales.pop(n - 1).clientes

    def cliente_mas_repetido(self) -> Optional[Cliente]:
        """Return the customer present in most branches, smallest id on ties.

        Returns None when there are no customers at all.
        """
        frecuencias = Counter(cliente.id for clientes in self for cliente in clientes)
        todos = (cliente for clientes in self for cliente in clientes)
        return min(
            todos,
            key=lambda cliente: (-frecuencias[cliente.id], cliente.id),
            default=None,
        )

    @staticmethod
    def _formatear(arboles: Iterable[ClientesABB]) -> str:
        lineas = [_ENCABEZADO]
        for clientes in arboles:
            lineas.append(f"Grupo con edad promedio {clientes.edad_promedio():.2f}:")
            if len(clientes):
                lineas.append(clientes.formatear())
        return "\n".join(lineas)

    def formatear(self) -> str:
        """Return all branches, lowest mean age first."""
        return self._formatear(self)

    def formatear_invertido(self) -> str:
        """Return all branches, highest mean age first."""
        return self._formatear(reversed(self))