"""Command interpreter for exercising the store's customers, products and branches."""

from __future__ import annotations

import argparse
import random
import sys
from itertools import count
from typing import Callable, Optional, TextIO, TypeVar

from mercado.carrito import CarritoProductos
from mercado.cliente import Cliente
from mercado.clientes_abb import ClientesABB
from mercado.fecha import Fecha
from mercado.lector import Lector
from mercado.producto import Producto
from mercado.sucursales import ClientesSucursales
from mercado.tiempos import medir_altura, medir_busquedas

_T = TypeVar("_T")

BIENVENIDA = (
    "Bienvenido al programa principal de Mercado FINGer. Por favor ingrese su comando:\n"
)


def _requerir(valor: Optional[_T], descripcion: str) -> _T:
    if valor is None:
        raise RuntimeError(f"no hay {descripcion} definido")
    return valor


class ConsolaMercado:
    """Reads commands from ``entrada`` and writes their results to ``salida``.

    The shopping cart and the customer tree always exist and start out empty;
    creating one requires the current one to be empty.
    """

    def __init__(self, entrada: TextIO, salida: TextIO) -> None:
        self._lector = Lector(entrada)
        self._salida = salida
        self._azar = random.Random()
        self.fecha: Optional[Fecha] = None
        self.cliente: Optional[Cliente] = None
        self.producto: Optional[Producto] = None
        self.carrito = CarritoProductos()
        self.clientes_abb = ClientesABB()
        self.sucursales: Optional[ClientesSucursales] = None
        self._comandos: dict[str, Callable[[], None]] = {
            "#": self._comentario,
            "crearFecha": self._crear_fecha,
            "imprimirFecha": self._imprimir_fecha,
            "liberarFecha": self._liberar_fecha,
            "aumentarDias": self._aumentar_dias,
            "compararFechas": self._comparar_fechas,
            "crearCliente": self._crear_cliente,
            "imprimirEdadCliente": self._imprimir_edad_cliente,
            "imprimirIdCliente": self._imprimir_id_cliente,
            "imprimirNombreYApellidoCliente": self._imprimir_nombre_apellido_cliente,
            "imprimirCliente": self._imprimir_cliente,
            "copiarCliente": self._copiar_cliente,
            "liberarCliente": self._liberar_cliente,
            "crearProducto": self._crear_producto,
            "imprimirProducto": self._imprimir_producto,
            "liberarProducto": self._liberar_producto,
            "idProducto": self._id_producto,
            "precioProducto": self._precio_producto,
            "crearCarritoProductos": self._crear_carrito,
            "agregarCarritoProductos": self._agregar_carrito,
            "imprimirCarritoProductos": self._imprimir_carrito,
            "liberarCarritoProductos": self._liberar_carrito,
            "esVacioCarritoProductos": self._es_vacio_carrito,
            "existeProductoCarritoProductos": self._existe_producto_carrito,
            "obtenerProductoCarritoProductos": self._obtener_producto_carrito,
            "removerDeCarritoProductos": self._remover_de_carrito,
            "crearClientesABB": self._crear_clientes_abb,
            "agregarAClientesABB": self._agregar_a_clientes_abb,
            "imprimirClientesABB": self._imprimir_clientes_abb,
            "existeEnClientesABB": self._existe_en_clientes_abb,
            "obtenerClienteClientesABB": self._obtener_cliente_abb,
            "alturaClientesABB": self._altura_clientes_abb,
            "maxIdClientesABB": self._max_id_clientes_abb,
            "cantidadClientesClientesABB": self._cantidad_clientes_abb,
            "edadPromedioClientesABB": self._edad_promedio_clientes_abb,
            "removerDeClientesABB": self._remover_de_clientes_abb,
            "liberarClientesABB": self._liberar_clientes_abb,
            "obtenerNesimoClienteClientesABB": self._obtener_nesimo_cliente_abb,
            "alturaClientesABBTiempo": self._altura_tiempo,
            "obtenerExisteClienteClientesABBTiempo": self._busquedas_tiempo,
            "crearClientesSucursalesLDE": self._crear_sucursales,
            "agregarAClientesSucursalesLDE": self._agregar_a_sucursales,
            "imprimirClientesSucursalesLDE": self._imprimir_sucursales,
            "imprimirInvertidaClientesSucursalesLDE": self._imprimir_invertida_sucursales,
            "obtenerNesimoClientesSucursalesLDE": self._obtener_nesimo_sucursales,
            "cantidadClientesSucursalesLDE": self._cantidad_sucursales,
            "obtenerPrimeroClientesSucursalesLDE": self._obtener_primero_sucursales,
            "removerUltimoClientesSucursalesLDE": self._remover_ultimo_sucursales,
            "removerNesimoClientesSucursalesLDE": self._remover_nesimo_sucursales,
            "liberarClientesSucursalesLDE": self._liberar_sucursales,
            "clienteMasRepetido": self._cliente_mas_repetido,
        }

    def _escribir(self, texto: str) -> None:
        self._salida.write(texto)

    def ejecutar(self) -> None:
        """Run commands until ``Fin`` or the end of input."""
        self._escribir(BIENVENIDA)
        for numero in count(1):
            self._escribir(f"{numero}> ")
            try:
                comando = self._lector.leer_palabra()
            except EOFError:
                return
            if comando == "Fin":
                self._escribir("Fin.\n")
                self._lector.consumir_resto_linea()
                return
            accion = self._comandos.get(comando)
            if accion is None:
                self._escribir("Comando no reconocido.\n")
            else:
                accion()
            self._lector.consumir_resto_linea()

    def _comentario(self) -> None:
        self._escribir(f"# {self._lector.leer_resto_linea()}.\n")

    # Dates

    def _crear_fecha(self) -> None:
        if self.fecha is not None:
            raise RuntimeError("ya hay una fecha definida")
        self.fecha = self._lector.leer_fecha()
        self._escribir("Fecha creada en forma exitosa.\n")

    def _imprimir_fecha(self) -> None:
        self._escribir(f"{_requerir(self.fecha, 'fecha')}\n")

    def _liberar_fecha(self) -> None:
        _requerir(self.fecha, "fecha")
        self.fecha = None
        self._escribir("Fecha liberada en forma exitosa.\n")

    def _aumentar_dias(self) -> None:
        fecha = _requerir(self.fecha, "fecha")
        dias = self._lector.leer_nat()
        fecha.aumentar(dias)
        self._escribir(f"La nueva fecha aplazada {dias} dias es: \n{fecha}\n")

    def _comparar_fechas(self) -> None:
        primera = self._lector.leer_fecha()
        segunda = self._lector.leer_fecha()
        resultado = primera.comparar(segunda)
        if resultado == 0:
            self._escribir("Las fechas son iguales. \n")
        elif resultado == 1:
            self._escribir("La primera fecha es posterior a la segunda. \n")
        else:
            self._escribir("La primera fecha es anterior a la segunda. \n")

    # Customers

    def _crear_cliente(self) -> None:
        if self.cliente is not None:
            raise RuntimeError("ya hay un cliente definido")
        id_cliente = self._lector.leer_int()
        nombre = self._lector.leer_palabra()
        apellido = self._lector.leer_palabra()
        edad = self._lector.leer_int()
        self.cliente = Cliente(id_cliente, nombre, apellido, edad)
        self._escribir("Cliente creado de forma exitosa.\n")

    def _imprimir_edad_cliente(self) -> None:
        cliente = _requerir(self.cliente, "cliente")
        self._escribir(f"La edad del cliente es: {cliente.edad}\n")

    def _imprimir_id_cliente(self) -> None:
        cliente = _requerir(self.cliente, "cliente")
        self._escribir(f"El id del cliente es: {cliente.id}\n")

    def _imprimir_nombre_apellido_cliente(self) -> None:
        cliente = _requerir(self.cliente, "cliente")
        self._escribir(f"El nombre del cliente es: {cliente.nombre}\n")
        self._escribir(f"El apellido del cliente es: {cliente.apellido}\n")

    def _imprimir_cliente(self) -> None:
        self._escribir(f"{_requerir(self.cliente, 'cliente').formatear()}\n")

    def _copiar_cliente(self) -> None:
        copia = _requerir(self.cliente, "cliente").copiar()
        self._escribir("Cliente copiado. Datos de la copia:\n")
        self._escribir(f"{copia.formatear()}\n")

    def _liberar_cliente(self) -> None:
        _requerir(self.cliente, "cliente")
        self.cliente = None
        self._escribir("Cliente liberado con exito.\n")

    # Products

    def _crear_producto(self) -> None:
        if self.producto is not None:
            raise RuntimeError("ya hay un producto definido")
        fecha = _requerir(self.fecha, "fecha")
        id_producto = self._lector.leer_int()
        nombre = self._lector.leer_palabra()
        precio = self._lector.leer_int()
        self.producto = Producto(id_producto, nombre, precio, fecha)
        self.fecha = None
        self._escribir("Producto creado en forma exitosa.\n")

    def _imprimir_producto(self) -> None:
        self._escribir(f"{_requerir(self.producto, 'producto').formatear()}\n")

    def _liberar_producto(self) -> None:
        _requerir(self.producto, "producto")
        self.producto = None
        self._escribir("Producto liberado en forma exitosa.\n")

    def _id_producto(self) -> None:
        self._escribir(f"ID: {_requerir(self.producto, 'producto').id}\n")

    def _precio_producto(self) -> None:
        self._escribir(f"Precio: {_requerir(self.producto, 'producto').precio}\n")

    # Shopping cart

    def _crear_carrito(self) -> None:
        if not self.carrito.es_vacio():
            raise RuntimeError("ya hay un carrito de productos con productos")
        self.carrito = CarritoProductos()
        self._escribir("Carrito de productos creado de forma exitosa.\n")

    def _agregar_carrito(self) -> None:
        self.carrito.insertar(_requerir(self.producto, "producto"))
        self._escribir("Producto agregado de forma exitosa.\n")
        self.producto = None

    def _imprimir_carrito(self) -> None:
        for producto in self.carrito:
            self._escribir(f"{producto.formatear()}\n")

    def _liberar_carrito(self) -> None:
        self.carrito = CarritoProductos()
        self._escribir("Carrito de productos liberado con exito.\n")

    def _es_vacio_carrito(self) -> None:
        if self.carrito.es_vacio():
            self._escribir("El carrito de productos es vacio.\n")
        else:
            self._escribir("El carrito de productos NO es vacio.\n")

    def _existe_producto_carrito(self) -> None:
        id_producto = self._lector.leer_int()
        if self.carrito.existe(id_producto):
            self._escribir(f"El producto con id {id_producto} se encuentra a el carrito.\n")
        else:
            self._escribir(
                f"El producto con id {id_producto} NO se encuentra en el carrito.\n"
            )

    def _producto_en_carrito(self, id_producto: int) -> Producto:
        producto = self.carrito.obtener(id_producto)
        if producto is None:
            raise RuntimeError(f"el producto con id {id_producto} no está en el carrito")
        return producto

    def _obtener_producto_carrito(self) -> None:
        id_producto = self._lector.leer_int()
        self._escribir(f"{self._producto_en_carrito(id_producto).formatear()}\n")

    def _remover_de_carrito(self) -> None:
        id_producto = self._lector.leer_int()
        self._producto_en_carrito(id_producto)
        self.carrito.remover(id_producto)
        self._escribir(f"Producto con id {id_producto} removido con exito.\n")

    # Customer tree

    def _escribir_arbol(self, arbol: ClientesABB) -> None:
        for cliente in arbol:
            self._escribir(f"{cliente.formatear()}\n")

    def _crear_clientes_abb(self) -> None:
        if len(self.clientes_abb):
            raise RuntimeError("ya hay un clientesABB con clientes")
        self.clientes_abb = ClientesABB()
        self._escribir("El clientesABB ha sido creado de forma exitosa.\n")

    def _agregar_a_clientes_abb(self) -> None:
        self.clientes_abb.insertar(_requerir(self.cliente, "cliente"))
        self.cliente = None
        self._escribir("Se ha agregado el cliente al clientesABB de forma exitosa.\n")

    def _imprimir_clientes_abb(self) -> None:
        self._escribir_arbol(self.clientes_abb)

    def _liberar_clientes_abb(self) -> None:
        self.clientes_abb = ClientesABB()
        self._escribir("ClientesABB liberado con exito.\n")

    def _existe_en_clientes_abb(self) -> None:
        id_cliente = self._lector.leer_int()
        if self.clientes_abb.existe(id_cliente):
            self._escribir(f"El cliente con id {id_cliente} pertenece al clientesABB.\n")
        else:
            self._escribir(f"El cliente con id {id_cliente} NO pertenece al clientesABB.\n")

    def _obtener_cliente_abb(self) -> None:
        id_cliente = self._lector.leer_int()
        cliente = self.clientes_abb.obtener(id_cliente)
        if cliente is None:
            self._escribir(
                f"El cliente con id {id_cliente} no se puede imprimir pues "
                "NO pertenece al clientesABB.\n"
            )
        else:
            self._escribir(f"{cliente.formatear()}\n")

    def _altura_clientes_abb(self) -> None:
        self._escribir(f"La altura del clientesABB es {self.clientes_abb.altura()}.\n")

    def _max_id_clientes_abb(self) -> None:
        maximo = self.clientes_abb.max_id()
        self._escribir(f"El mayor id en el clientesABB es {maximo.id}.\n")

    def _cantidad_clientes_abb(self) -> None:
        self._escribir(
            f"La cantidad de clientes en el clientesABB es {self.clientes_abb.cantidad()}.\n"
        )

    def _edad_promedio_clientes_abb(self) -> None:
        promedio = self.clientes_abb.edad_promedio()
        self._escribir(f"La edad promedio del clientesABB es {promedio:.2f}.\n")

    def _remover_de_clientes_abb(self) -> None:
        id_cliente = self._lector.leer_int()
        if self.clientes_abb.existe(id_cliente):
            self.clientes_abb.remover(id_cliente)
            self._escribir(f"El cliente con id {id_cliente} se removio del clientesABB.\n")
        else:
            self._escribir(
                f"El cliente con id {id_cliente} no se puede remover porque "
                "NO pertenece al clientesABB.\n"
            )

    def _obtener_nesimo_cliente_abb(self) -> None:
        n = self._lector.leer_int()
        cantidad = self.clientes_abb.cantidad()
        if cantidad >= n:
            cliente = self.clientes_abb.obtener_nesimo(n)
            if cliente is None:
                raise RuntimeError(f"posición {n} inválida en el clientesABB")
            self._escribir(f"Cliente nro {n} del clientesABB:\n{cliente.formatear()}\n")
        else:
            self._escribir(
                f"No se puede imprimir vistante {n} del clientesABB porque tiene "
                f"solo {cantidad} clientes.\n"
            )

    def _altura_tiempo(self) -> None:
        tamanio = self._lector.leer_nat()
        timeout = self._lector.leer_nat()
        self._escribir(f"{medir_altura(tamanio, timeout)}\n")

    def _busquedas_tiempo(self) -> None:
        tamanio = self._lector.leer_nat()
        timeout = self._lector.leer_double()
        self._escribir(f"{medir_busquedas(tamanio, timeout)}\n")

    # Branches

    def _cantidad_en_sucursales(self) -> int:
        return 0 if self.sucursales is None else len(self.sucursales)

    def _crear_sucursales(self) -> None:
        if self.sucursales is not None:
            raise RuntimeError("ya hay una lista de sucursales definida")
        self.sucursales = ClientesSucursales()
        self._escribir("La SucursalesLDE de clientes ha sido creado de forma exitosa.\n")

    def _agregar_a_sucursales(self) -> None:
        if not len(self.clientes_abb):
            raise RuntimeError("no hay clientesABB con clientes para agregar")
        sucursales = _requerir(self.sucursales, "lista de sucursales")
        sucursales.insertar(self.clientes_abb, self._azar.randrange(1000))
        self.clientes_abb = ClientesABB()
        self._escribir("Se ha agregado el clientesABB a SucursalesLDE de forma exitosa.\n")

    def _imprimir_sucursales(self) -> None:
        sucursales = _requerir(self.sucursales, "lista de sucursales")
        self._escribir(f"{sucursales.formatear()}\n")

    def _imprimir_invertida_sucursales(self) -> None:
        sucursales = _requerir(self.sucursales, "lista de sucursales")
        self._escribir(f"{sucursales.formatear_invertido()}\n")

    def _obtener_nesimo_sucursales(self) -> None:
        n = self._lector.leer_int()
        arbol = None if self.sucursales is None else self.sucursales.obtener_nesimo(n)
        if arbol is not None and len(arbol):
            self._escribir(f"ClientesABB en la posicion {n}:\n")
            self._escribir_arbol(arbol)
        else:
            self._escribir(f"NO existe un clientesABB en la posicion {n}\n")

    def _cantidad_sucursales(self) -> None:
        self._escribir(
            f"La cantidad de clientesABB en SucursalesLDE es {self._cantidad_en_sucursales()}\n"
        )

    def _obtener_primero_sucursales(self) -> None:
        if self.sucursales is not None and len(self.sucursales) > 0:
            primero = _requerir(self.sucursales.primero(), "clientesABB")
            self._escribir("Primer clientesABB:\n")
            self._escribir_arbol(primero)
        else:
            self._escribir(
                "No se puede obtener el primero de los clientesABB de SucursalesLDE "
                "porque es vacia\n"
            )

    def _remover_ultimo_sucursales(self) -> None:
        if self.sucursales is not None and len(self.sucursales) > 0:
            ultimo = self.sucursales.remover_ultimo()
            self._escribir("Ultimo clientesABB (removido):\n")
            self._escribir_arbol(ultimo)
        else:
            self._escribir(
                "No se puede remover el ultimo clientesABB de SucursalesLDE porque es vacia\n"
            )

    def _remover_nesimo_sucursales(self) -> None:
        n = self._lector.leer_nat()
        cantidad = self._cantidad_en_sucursales()
        if cantidad >= n:
            sucursales = _requerir(self.sucursales, "lista de sucursales")
            removido = sucursales.remover_nesimo(n)
            self._escribir(f"clientesABB en la posicion {n} (removido):\n")
            self._escribir_arbol(removido)
        else:
            self._escribir(
                f"No se puede remover el elemento {n} de SucursalesLDE porque "
                f"solo contiene {cantidad}\n"
            )

    def _liberar_sucursales(self) -> None:
        _requerir(self.sucursales, "lista de sucursales")
        self.sucursales = None
        self._escribir("SucursalesLDE de ClientesABB liberada\n")

    def _cliente_mas_repetido(self) -> None:
        sucursales = _requerir(self.sucursales, "lista de sucursales")
        cliente = sucursales.cliente_mas_repetido()
        if cliente is None:
            self._escribir(
                "No hay cliente repetido porque no hay clientes en los clientesABB "
                "de sucursales.\n"
            )
        else:
            self._escribir("El cliente que aparece en la mayor cantidad de sucursales es:\n")
            self._escribir(f"{cliente.formatear()}\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the store console over a file or standard input."""
    parser = argparse.ArgumentParser(
        prog="consola-mercado",
        description="Intérprete de comandos para clientes, productos y sucursales.",
    )
    parser.add_argument(
        "archivo", nargs="?", help="archivo de comandos (por defecto, la entrada estándar)"
    )
    argumentos = parser.parse_args(argv)
    if argumentos.archivo:
        with open(argumentos.archivo, encoding="utf-8") as entrada:
            ConsolaMercado(entrada, sys.stdout).ejecutar()
    else:
        ConsolaMercado(sys.stdin, sys.stdout).ejecutar()
    return 0


if __name__ == "__main__":
    sys.exit(main())