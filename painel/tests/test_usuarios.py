import unittest
from unittest.mock import MagicMock, patch

from painel.core.models import UserProfile
from painel.screens import usuarios
from painel.screens.usuarios import UsuariosState
from painel.tests.supabase_mock import FakeAPIError, make_supabase_mock


class TestUsuarios(unittest.TestCase):
    def setUp(self):
        self.mock_supabase_client, self.mock_table_methods = make_supabase_mock()
        self.mock_table_methods.execute.return_value = MagicMock(data=[
            {"id": "u1", "email": "ana@escritorio.com", "full_name": "Ana Souza", "created_at": "2026-01-10T09:00:00"},
            {"id": "u2", "email": "bruno@escritorio.com", "full_name": None, "created_at": "2026-02-11T09:00:00"},
        ])

    def test_fetch_users(self):
        state, toasts = usuarios.handle_fetch_users(self.mock_supabase_client, UsuariosState())
        self.assertEqual(toasts, [])
        self.assertFalse(state.loading)
        self.assertEqual([u.email for u in state.users], ["ana@escritorio.com", "bruno@escritorio.com"])
        self.mock_supabase_client.table.assert_called_with("profiles")

    def test_fetch_users_erro_remoto_esvazia_lista(self):
        self.mock_table_methods.execute.side_effect = FakeAPIError('relation "profiles" does not exist')
        previous = UsuariosState(users=(UserProfile(id="u1", email="ana@escritorio.com"),), loading=False)
        state, toasts = usuarios.handle_fetch_users(self.mock_supabase_client, previous)
        self.assertEqual(state.users, ())
        self.assertFalse(state.loading)
        self.assertEqual(toasts[0].title, "Erro ao buscar usuários")
        self.assertEqual(toasts[0].description, 'relation "profiles" does not exist')

    @patch("painel.core.db.get_profiles", side_effect=RuntimeError("boom"))
    def test_fetch_users_erro_inesperado(self, mock_get_profiles):
        state, toasts = usuarios.handle_fetch_users(self.mock_supabase_client, UsuariosState())
        self.assertEqual(state.users, ())
        self.assertFalse(state.loading)
        self.assertEqual(toasts[0].title, "Erro inesperado")

    def test_create_user_apenas_simula(self):
        state = usuarios.reduce(UsuariosState(), usuarios.OPEN_MODAL)
        state = usuarios.reduce(state, usuarios.SET_FORM, {
            "new_email": "novo@escritorio.com", "new_password": "segredo", "new_full_name": "Novo", "extra": "x",
        })
        mock_sleep = MagicMock()

        state, toasts = usuarios.handle_create_user(self.mock_supabase_client, state, sleep=mock_sleep)

        mock_sleep.assert_called_once_with(usuarios.SIMULATED_CREATE_DELAY)
        self.assertEqual(toasts[0].variant, "warning")
        self.assertEqual(toasts[1].title, "Usuário Criado (Simulado)")
        self.assertIn("novo@escritorio.com", toasts[1].description)

        # Nada é gravado: nenhuma escrita em tabela e nenhuma chamada admin
        self.mock_table_methods.insert.assert_not_called()
        self.assertFalse(self.mock_supabase_client.auth.admin.create_user.called)

        self.assertFalse(state.is_modal_open)
        self.assertFalse(state.creating_user)
        self.assertEqual(state.new_email, "")
        self.assertEqual(state.new_password, "")
        self.assertEqual(len(state.users), 2)

    def test_reducer_acao_desconhecida(self):
        with self.assertRaises(ValueError):
            usuarios.reduce(UsuariosState(), "qualquer_coisa")


if __name__ == "__main__":
    unittest.main()
