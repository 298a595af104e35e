"""A binary search tree of customers keyed by id."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from mercado.cliente import Cliente


@dataclass
class _Nodo:
    elem: Cliente
    izq: Optional[_Nodo] = None
    der: Optional[_Nodo] = None


class ClientesABB:
    """Customers stored in an unbalanced binary search tree ordered by id."""

    def __init__(self) -> None:
        self._raiz: Optional[_Nodo] = None
        self._cantidad = 0

    def insertar(self, cliente: Cliente) -> None:
        """Insert ``cliente``; a customer whose id is already present is ignored."""
        if self._raiz is None:
            self._raiz = _Nodo(cliente)
            self._cantidad += 1
            return
        nodo = self._raiz
        while True:
            if cliente.id > nodo.elem.id:
                if nodo.der is None:
                    nodo.der = _Nodo(cliente)
                    break
                nodo = nodo.der
            elif cliente.id < nodo.elem.id:
                if nodo.izq is None:
                    nodo.izq = _Nodo(cliente)
                    break
                nodo = nodo.izq
            else:
                return
        self._cantidad += 1

    def __iter__(self) -> Iterator[Cliente]:
        pila: list[_Nodo] = []
        nodo = self._raiz
        while pila or nodo is not None:
            while nodo is not None:
                pila.append(nodo)
                nodo = nodo.izq
            nodo = pila.pop()
            yield nodo.elem
            nodo = nodo.der

    def __len__(self) -> int:
        return self._cantidad

    def _buscar(self, id_cliente: int) -> Optional[_Nodo]:
        nodo = self._raiz
        while nodo is not None and nodo.elem.id != id_cliente:
            nodo = nodo.izq if nodo.elem.id > id_cliente else nodo.der
        return nodo

    def existe(self, id_cliente: int) -> bool:
        """Return True if a customer with ``id_cliente`` is in the tree."""
        return self._buscar(id_cliente) is not None

    def obtener(self, id_cliente: int) -> Optional[Cliente]:
        """Return the customer with ``id_cliente``, or None if absent."""
        nodo = self._buscar(id_cliente)
        return None if nodo is None else nodo.elem

    def altura(self) -> int:
        """Return the number of levels of the tree; 0 when empty."""
        altura = 0
        nivel = [self._raiz] if self._raiz is not None else []
        while nivel:
            altura += 1
            nivel = [hijo for nodo in nivel for hijo in (nodo.izq, nodo.der) if hijo is not None]
        return altura

    def max_id(self) -> Cliente:
        """Return the customer with the largest id."""
        if self._raiz is None:
            raise ValueError("el árbol de clientes es vacío")
        nodo = self._raiz
        while nodo.der is not None:
            nodo = nodo.der
        return nodo.elem

    def remover(self, id_cliente: int) -> None:
        """Remove the customer with ``id_cliente``; do nothing if absent.

        A node with two children takes the customer with the largest id of
        its left subtree.
        """
        padre: Optional[_Nodo] = None
        nodo = self._raiz
        while nodo is not None and nodo.elem.id != id_cliente:
            padre = nodo
            nodo = nodo.izq if nodo.elem.id > id_cliente else nodo.der
        if nodo is None:
            return
        if nodo.izq is not None and nodo.der is not None:
            padre_max = nodo
            maximo = nodo.izq
            while maximo.der is not None:
                padre_max = maximo
                maximo = maximo.der
            nodo.elem = maximo.elem
            if padre_max is nodo:
                padre_max.izq = maximo.izq
            else:
                padre_max.der = maximo.izq
        else:
            hijo = nodo.izq if nodo.izq is not None else nodo.der
            if padre is None:
                self._raiz = hijo
            elif padre.izq is nodo:
                padre.izq = hijo
            else:
                padre.der = hijo
        self._cantidad -= 1

    def cantidad(self) -> int:
        """Return the number of customers in the tree."""
        return self._cantidad

    def edad_promedio(self) -> float:
        """Return the mean age of the customers, or 0.0 when empty."""
        if self._cantidad == 0:
            return 0.0
        return sum(cliente.edad for cliente in self) / self._cantidad

    def obtener_nesimo(self, n: int) -> Optional[Cliente]:
        """Return the ``n``-th customer by id, counting from 1, or None if out of range."""
        if n < 1:
            return None
        for posicion, cliente in enumerate(self, start=1):
            if posicion == n:
                return cliente
        return None

    def formatear(self) -> str:
        """Return every customer's description in id order."""
        return "\n".join(cliente.formatear() for cliente in self)