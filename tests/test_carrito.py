import pytest

from mercado.carrito import CarritoProductos
from mercado.fecha import Fecha
from mercado.producto import Producto


def _producto(ident: int, nombre: str = "Leche", precio: int = 50) -> Producto:
    return Producto(ident, nombre, precio, Fecha(1, 2, 2024))


@pytest.fixture
def carrito() -> CarritoProductos:
    carrito = CarritoProductos()
    for ident in (5, 2, 9, 1):
        carrito.insertar(_producto(ident))
    return carrito


def test_nuevo_carrito_es_vacio():
    carrito = CarritoProductos()
    assert carrito.es_vacio()
    assert len(carrito) == 0
    assert carrito.formatear() == ""


def test_insertar_ordena_por_id(carrito):
    assert [p.id for p in carrito] == [1, 2, 5, 9]
    assert not carrito.es_vacio()
    assert len(carrito) == 4


def test_existe(carrito):
    assert carrito.existe(5)
    assert not carrito.existe(3)


def test_obtener_devuelve_el_producto(carrito):
    producto = carrito.obtener(9)
    assert producto is not None
    assert producto.id == 9
    assert carrito.obtener(42) is None


def test_remover_quita_solo_ese(carrito):
    carrito.remover(2)
    assert [p.id for p in carrito] == [1, 5, 9]
    carrito.remover(1)
    assert [p.id for p in carrito] == [5, 9]
    carrito.remover(9)
    assert [p.id for p in carrito] == [5]


def test_remover_ausente_no_cambia(carrito):
    carrito.remover(100)
    assert [p.id for p in carrito] == [1, 2, 5, 9]


def test_remover_todos_deja_vacio():
    carrito = CarritoProductos()
    carrito.insertar(_producto(3))
    carrito.remover(3)
    assert carrito.es_vacio()


def test_formatear_concatena_productos():
    carrito = CarritoProductos()
    segundo = _producto(7, "Pan", 30)
    primero = _producto(4, "Queso", 120)
    carrito.insertar(segundo)
    carrito.insertar(primero)
    assert carrito.formatear() == primero.formatear() + "\n" + segundo.formatear()
    assert carrito.formatear().startswith("Producto: 4\nQueso\n")