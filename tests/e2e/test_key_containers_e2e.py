# tests/e2e/test_key_containers_e2e.py
"""
Tests E2E: Key como clave de contenedores asociativos reales.
Escenario: una tabla de rutas construida con claves estáticas y consultada
con texto dinámico (tal como llega desde fuera).
"""

import bisect

from textkey import Key, StaticText

ROUTES = {
    Key.from_static("usuarios"): "listar_usuarios",
    Key.from_static("pedidos"): "listar_pedidos",
    Key.from_iter(["usuarios", "/", "admin"]): "panel_admin",
}


def test_lookup_with_plain_text_finds_static_entries():
    """
    Given: Un dict con claves en forma prestada
    When: Se consulta con str construidos en runtime
    Then: Se encuentran las entradas sin envolver el texto en Key
    """
    # Arrange
    requested = "".join(["usu", "arios"])

    # Act & Assert
    assert ROUTES[requested] == "listar_usuarios"
    assert ROUTES["usuarios/admin"] == "panel_admin"
    assert "inexistente" not in ROUTES


def test_lookup_with_owned_key_finds_borrowed_entry():
    assert ROUTES[Key.from_iter("pedidos")] == "listar_pedidos"
    assert ROUTES[Key(StaticText("pedidos"))] == "listar_pedidos"


def test_set_deduplicates_across_representations():
    # Arrange
    keys = {
        Key.from_static("a"),
        Key("a"),
        Key.from_iter(["a"]),
        Key.from_static("b"),
    }

    # Assert
    assert len(keys) == 2
    assert keys == {"a", "b"}


def test_sorted_index_with_bisect():
    # Arrange
    index = sorted(Key(name) for name in ["delta", "alfa", "charlie", "bravo"])

    # Act
    position = bisect.bisect_left(index, Key.from_static("charlie"))

    # Assert
    assert index[position] == "charlie"
    assert [key.as_str() for key in index] == ["alfa", "bravo", "charlie", "delta"]


def test_default_key_as_map_key():
    table = {Key(): "raíz"}

    assert table[""] == "raíz"
    assert table[Key.from_iter([])] == "raíz"
