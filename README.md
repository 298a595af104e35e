# mercado

Small in-memory collections built around a calendar date, and two
line-oriented command interpreters that exercise them.

## What is inside

| Module | Main names |
| --- | --- |
| `mercado.fecha` | `Fecha` (`aumentar`, `comparar`, ordering), `es_bisiesto`, `dias_mes` |
| `mercado.lector` | `Lector`: reads naturals, integers, characters, reals, words, lines and dates `dd/mm/aaaa` from a text stream |
| `mercado.persona` | `Persona` (`es_mas_joven`, `formatear`) |
| `mercado.grupo` | `Grupo`: people kept ordered by birth date, at most 100 of them |
| `mercado.consola_grupo` | `ConsolaGrupo`, `main`: interpreter for dates, people and groups |
| `mercado.cliente` | `Cliente` (`copiar`, `formatear`) |
| `mercado.producto` | `Producto` (`formatear`) |
| `mercado.carrito` | `CarritoProductos`: products kept ordered by id |
| `mercado.clientes_abb` | `ClientesABB`: customers in a binary search tree keyed by id |
| `mercado.sucursales` | `ClientesSucursales`: customer trees kept ordered by average age |
| `mercado.tiempos` | `arbol_balanceado`, `medir_altura`, `medir_busquedas` |
| `mercado.consola_mercado` | `ConsolaMercado`, `main`: interpreter for customers, products, cart, tree and branches |

Some behaviour worth knowing:

- `Fecha.comparar` returns `1`, `0` or `-1`; `Fecha.aumentar` moves the date
  forward in place, rolling over months and years.
- `Grupo.agregar` keeps people ordered by birth date, earliest first; people
  sharing a birth date are kept newest-added first. Once the group holds 100
  people, further additions are ignored.
- `ClientesABB.insertar` ignores a customer whose id is already present.
  When a node with two children is removed, it takes the customer with the
  largest id of its left subtree. `ClientesABB.max_id` raises `ValueError`
  on an empty tree.
- `ClientesABB.obtener_nesimo` and `ClientesSucursales.obtener_nesimo` count
  from 1 and return `None` when out of range; `remover_ultimo` and
  `remover_nesimo` raise `IndexError` instead.
- `ClientesSucursales.insertar` places a tree after every branch whose average
  age is not above its own.
- `ClientesSucursales.cliente_mas_repetido` returns the customer present in the
  most branches, the smallest id winning ties, or `None` when there are no
  customers at all.
- `medir_altura` and `medir_busquedas` build a balanced tree of the given size,
  time the height or four lookups with process time, and return a report line.

## Installing

```
pip install .
```

## The command interpreters

Both interpreters read commands from the file named on the command line, or
from standard input when none is given, and write their answers to standard
output. Every command is preceded by a numbered prompt. `Fin` ends the
session, as does the end of input, and `# text` echoes the comment back.
An unknown command answers `Comando no reconocido.` Commands that need
something not yet created (for example printing a person before creating one)
raise `RuntimeError`.

### `mercado-grupo`

Works with one date, one person and one group at a time:

```
crearFecha 3/5/1990
crearPersona 1234 Ana Perez
crearGrupo
agregarAGrupo
imprimirGrupo
estaEnGrupo 1234
Fin
```

Commands: `crearFecha`, `imprimirFecha`, `liberarFecha`, `aumentarDias`,
`compararFechas`, `crearPersona`, `imprimirCiPersona`, `imprimirFechaPersona`,
`imprimirNombreYApellidoPersona`, `imprimirPersona`, `liberarPersona`,
`esMasJovenPersona`, `crearGrupo`, `agregarAGrupo`, `imprimirGrupo`,
`liberarGrupo`, `estaEnGrupo`, `imprimirPersonasFecha`, `hayPersonasFecha`,
`removerDeGrupo`.

### `mercado`

Prints a welcome line, then works with a date, a customer, a product, a cart,
a customer tree and a list of branches. The cart and the customer tree always
exist and start out empty:

```
crearCliente 7 Carlos Luna 45
crearClientesABB
agregarAClientesABB
imprimirClientesABB
edadPromedioClientesABB
Fin
```

Commands cover dates (`crearFecha`, `imprimirFecha`, `liberarFecha`,
`aumentarDias`, `compararFechas`), customers (`crearCliente`,
`imprimirEdadCliente`, `imprimirIdCliente`, `imprimirNombreYApellidoCliente`,
`imprimirCliente`, `copiarCliente`, `liberarCliente`), products
(`crearProducto`, `imprimirProducto`, `liberarProducto`, `idProducto`,
`precioProducto`), the cart (`crearCarritoProductos`,
`agregarCarritoProductos`, `imprimirCarritoProductos`,
`liberarCarritoProductos`, `esVacioCarritoProductos`,
`existeProductoCarritoProductos`, `obtenerProductoCarritoProductos`,
`removerDeCarritoProductos`), the customer tree (`crearClientesABB`,
`agregarAClientesABB`, `imprimirClientesABB`, `existeEnClientesABB`,
`obtenerClienteClientesABB`, `alturaClientesABB`, `maxIdClientesABB`,
`cantidadClientesClientesABB`, `edadPromedioClientesABB`,
`removerDeClientesABB`, `liberarClientesABB`,
`obtenerNesimoClienteClientesABB`, `alturaClientesABBTiempo`,
`obtenerExisteClienteClientesABBTiempo`) and the branch list
(`crearClientesSucursalesLDE`, `agregarAClientesSucursalesLDE`,
`imprimirClientesSucursalesLDE`, `imprimirInvertidaClientesSucursalesLDE`,
`obtenerNesimoClientesSucursalesLDE`, `cantidadClientesSucursalesLDE`,
`obtenerPrimeroClientesSucursalesLDE`, `removerUltimoClientesSucursalesLDE`,
`removerNesimoClientesSucursalesLDE`, `liberarClientesSucursalesLDE`,
`clienteMasRepetido`). `agregarAClientesSucursalesLDE` gives the branch a
random id below 1000.

Typical use is to feed a whole script:

```
mercado casos.in
mercado < casos.in
```

## What it does not do

Everything lives in memory for the length of a session: nothing is saved to
or loaded from disk, and there is no server or interactive screen beyond the
line-by-line interpreters.

## Running the tests

```
pip install .[test]
pytest
```