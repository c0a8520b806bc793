"""Pruebas del modelo ``User`` y del repositorio."""

from unittest.mock import Mock

import pytest

from usuarios_app.core.errors import FetchError
from usuarios_app.infrastructure.repositories import UserRepository
from usuarios_app.models.user import User


class TestUser:
    def test_from_api_keeps_raw_fields(self):
        datos = {
            "id": 7,
            "first_name": "Bruno",
            "last_name": "Díaz",
            "avatar": "https://robohash.org/7.png",
            "email": "bruno@example.com",
        }
        usuario = User.from_api(datos)

        assert usuario.id == 7
        assert usuario.clave == "7"
        assert usuario.nombre_completo == "Bruno Díaz"
        assert usuario.iniciales == "BD"
        assert usuario.datos["email"] == "bruno@example.com"

    def test_initials_tolerate_empty_names(self):
        usuario = User(id=1, first_name="", last_name="paz", avatar="")
        assert usuario.iniciales == "P"
        assert usuario.nombre_completo == "paz"

    def test_missing_field_raises_key_error(self):
        with pytest.raises(KeyError):
            User.from_api({"id": 1, "first_name": "Ana"})

    def test_users_are_immutable(self):
        usuario = User(id=1, first_name="Ana", last_name="Paz", avatar="")
        with pytest.raises(AttributeError):
            usuario.first_name = "Otra"


class TestUserRepository:
    def test_maps_items_in_order(self):
        client = Mock()
        client.obtener_usuarios_aleatorios.return_value = [
            {"id": 2, "first_name": "B", "last_name": "B", "avatar": ""},
            {"id": 1, "first_name": "A", "last_name": "A", "avatar": ""},
        ]
        usuarios = UserRepository(client).obtener_lote(2)

        client.obtener_usuarios_aleatorios.assert_called_once_with(2)
        assert [u.id for u in usuarios] == [2, 1]

    def test_malformed_item_raises_fetch_error(self):
        client = Mock()
        client.obtener_usuarios_aleatorios.return_value = [{"id": 1}, "no-es-objeto"]
        with pytest.raises(FetchError):
            UserRepository(client).obtener_lote(2)
