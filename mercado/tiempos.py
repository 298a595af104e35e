"""Timed checks on customer trees built in balanced insertion order."""

from __future__ import annotations

import time
from typing import Sequence

from mercado.cliente import Cliente
from mercado.clientes_abb import ClientesABB


def arbol_balanceado(clientes: Sequence[Cliente]) -> ClientesABB:
    """Return a tree holding ``clientes``, inserted middle first.

    When ``clientes`` is sorted by id the resulting tree is balanced.
    """
    arbol = ClientesABB()

    def _insertar(inicio: int, final: int) -> None:
        if inicio <= final:
            medio = (inicio + final) // 2
            arbol.insertar(clientes[medio])
            _insertar(inicio, medio - 1)
            _insertar(medio + 1, final)

    _insertar(0, len(clientes) - 1)
    return arbol


def _validar_tamanio(tamanio: int) -> None:
    if tamanio < 0:
        raise ValueError("el tamaño no puede ser negativo")


def _clientes(tamanio: int, nombre: str, apellido: str, edad: int) -> list[Cliente]:
    return [Cliente(i, nombre, apellido, edad) for i in range(tamanio)]


def medir_altura(tamanio: int, timeout: int) -> str:
    """Build a balanced tree of ``tamanio`` customers and time its height.

    Returns the report line, without a trailing newline.
    """
    _validar_tamanio(tamanio)
    arbol = arbol_balanceado(_clientes(tamanio, "Alberto", "Pardo", 52))
    inicio = time.process_time()
    altura = arbol.altura()
    tiempo = time.process_time() - inicio
    if tiempo > timeout:
        return f"ERROR, tiempo excedido; {tiempo:.1f} > {timeout} "
    return (
        f"La altura del clientesABB es {altura}. "
        f"Calculado correctamente en menos de {timeout}s."
    )


def medir_busquedas(tamanio: int, timeout: float) -> str:
    """Build a balanced tree of ``tamanio`` customers and time four lookups.

    Returns the report, without a trailing newline. ``tamanio`` must be
    at least 1, since the largest id looked up is ``tamanio - 1``.
    """
    _validar_tamanio(tamanio)
    if tamanio == 0:
        raise ValueError("el tamaño debe ser al menos 1")
    arbol = arbol_balanceado(_clientes(tamanio, "Carlos", "Luna", 45))
    buscados = (0, tamanio - 1, tamanio // 3, (2 * tamanio) // 3)
    inicio = time.process_time()
    existen = [arbol.existe(id_cliente) for id_cliente in buscados]
    obtenidos = [arbol.obtener(id_cliente) for id_cliente in buscados]
    tiempo = time.process_time() - inicio
    if tiempo > timeout:
        return f"ERROR, tiempo excedido: {tiempo:.3f} > {timeout:.3f} "
    banderas = " ".join(str(int(existe)) for existe in existen)
    ids = " ".join(str(cliente.id) for cliente in obtenidos if cliente is not None)
    return (
        f"Se obtuvieron los clientes? {banderas} con ids respectivos {ids}\n"
        f"Calculado correctamente en menos de {timeout:.3f}s."
    )