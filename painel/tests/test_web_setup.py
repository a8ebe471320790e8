import datetime
import unittest
from unittest.mock import MagicMock

from painel.tests.supabase_mock import FakeAPIError, make_supabase_mock
from painel.web.web_setup import setup_web_app


class TestWebSetup(unittest.TestCase):
    def setUp(self):
        self.mock_supabase_client, self.mock_table_methods = make_supabase_mock()
        app = setup_web_app({
            "SUPABASE_CLIENT": self.mock_supabase_client,
            "FLASK_SECRET_KEY": "test",
            "STATUS_IGNORADOS": [],
            "USER_CREATE_DELAY": 0,
        })
        app.testing = True
        self.client = app.test_client()

    def _set_rows(self, rows):
        self.mock_table_methods.execute.return_value = MagicMock(data=rows)

    def test_home_redireciona_para_relatorios(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.headers["Location"].endswith("/relatorios"))

    # --- Relatórios ---
    def test_relatorios_page(self):
        yesterday = (datetime.date.today() - datetime.timedelta(days=1)).isoformat()
        self._set_rows([
            {"id": 1, "valor": 50, "status": "Pendente", "data_vencimento": yesterday},
        ])
        response = self.client.get("/relatorios")
        body = response.get_data(as_text=True)
        self.assertEqual(response.status_code, 200)
        self.assertIn("Total a Receber", body)
        self.assertIn("R$ 50,00", body)
        self.assertIn("Receita Mensal", body)

    def test_relatorios_page_usa_uma_unica_carga(self):
        self._set_rows([{"id": 1, "valor": 50, "status": "Pendente"}])
        body = self.client.get("/relatorios").get_data(as_text=True)
        self.assertEqual(self.mock_table_methods.execute.call_count, 1)
        self.assertIn("data:image/png;base64,", body)
        self.assertNotIn("/relatorios/receitas.png", body)

    def test_relatorios_dados_json(self):
        response = self.client.get("/relatorios/dados.json")
        data = response.get_json()
        self.assertEqual(len(data["monthly_revenue"]), 12)
        self.assertEqual(data["overdue_count"], 0)
        self.assertEqual(data["errors"], [])

    def test_relatorios_chart_png(self):
        response = self.client.get("/relatorios/receitas.png")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.mimetype, "image/png")

    def test_relatorios_falha_mostra_aviso(self):
        self.mock_table_methods.execute.side_effect = FakeAPIError("JWT expired")
        response = self.client.get("/relatorios")
        body = response.get_data(as_text=True)
        self.assertEqual(response.status_code, 200)
        self.assertIn("Não foi possível carregar os lançamentos.", body)

    # --- Configurações ---
    def test_configuracoes_lista_modelos(self):
        self._set_rows([{"id": "t1", "title": "Cobrança", "content": "Olá [nome_cliente]"}])
        body = self.client.get("/configuracoes").get_data(as_text=True)
        self.assertIn("Cobrança", body)
        self.assertIn("/configuracoes/modelos/t1/duplicar", body)

    def test_novo_modelo_inserir_variavel_nao_salva(self):
        response = self.client.post("/configuracoes/modelos/novo", data={
            "title": "Lembrete", "content": "Olá", "variavel": "[nome_cliente]",
        })
        body = response.get_data(as_text=True)
        self.assertIn("Olá [nome_cliente]", body)
        self.mock_table_methods.insert.assert_not_called()

    def test_novo_modelo_salvar(self):
        self._set_rows([{"id": "t1", "title": "Lembrete", "content": "Olá"}])
        response = self.client.post("/configuracoes/modelos/novo", data={
            "title": "Lembrete", "content": "Olá", "salvar": "1",
        })
        self.assertEqual(response.status_code, 302)
        self.mock_table_methods.insert.assert_called_once()

    def test_editar_modelo_inexistente_redireciona(self):
        self._set_rows([])
        response = self.client.get("/configuracoes/modelos/t9", follow_redirects=True)
        self.assertIn("Modelo não encontrado.", response.get_data(as_text=True))

    def test_editar_modelo_salvar(self):
        self._set_rows([{"id": "t1", "title": "Cobrança", "content": "Olá"}])
        response = self.client.post("/configuracoes/modelos/t1", data={
            "title": "Lembrete", "content": "Novo texto", "salvar": "1",
        })
        self.assertEqual(response.status_code, 302)
        self.mock_table_methods.update.assert_called_once_with({"title": "Lembrete", "content": "Novo texto"})
        self.mock_table_methods.eq.assert_called_once_with("id", "t1")

    def test_duplicar_modelo(self):
        self._set_rows([{"id": "t1", "title": "Cobrança", "content": "Olá [nome_cliente]"}])
        response = self.client.post("/configuracoes/modelos/t1/duplicar")
        self.assertEqual(response.status_code, 302)
        self.mock_table_methods.insert.assert_called_once_with({
            "title": "Cobrança (Cópia)", "content": "Olá [nome_cliente]", "user_id": "user-1", "is_default": False,
        })

    def test_duplicar_modelo_inexistente(self):
        self._set_rows([])
        response = self.client.post("/configuracoes/modelos/t9/duplicar", follow_redirects=True)
        self.assertIn("Modelo não encontrado.", response.get_data(as_text=True))
        self.mock_table_methods.insert.assert_not_called()

    def test_modelo_form_avisa_copia(self):
        body = self.client.get("/configuracoes/modelos/novo").get_data(as_text=True)
        self.assertIn("Copiar Mensagem", body)
        self.assertIn("Mensagem copiada para a área de transferência.", body)

    def test_remover_modelo(self):
        response = self.client.post("/configuracoes/modelos/t1/remover")
        self.assertEqual(response.status_code, 302)
        self.mock_table_methods.delete.assert_called_once()
        self.mock_table_methods.eq.assert_called_with("id", "t1")

    def test_alterar_senha_diferentes(self):
        response = self.client.post("/configuracoes/senha", data={
            "new_password": "abc123", "confirm_password": "xyz",
        })
        self.assertEqual(response.status_code, 200)
        self.assertIn("As senhas não coincidem.", response.get_data(as_text=True))
        self.mock_supabase_client.auth.update_user.assert_not_called()

    def test_alterar_senha_ok(self):
        response = self.client.post("/configuracoes/senha", data={
            "new_password": "abc123", "confirm_password": "abc123",
        })
        self.assertEqual(response.status_code, 302)
        self.mock_supabase_client.auth.update_user.assert_called_once_with({"password": "abc123"})

    # --- Usuários ---
    def test_usuarios_page(self):
        self._set_rows([{"id": "u1", "email": "ana@escritorio.com", "full_name": "Ana Souza"}])
        body = self.client.get("/usuarios").get_data(as_text=True)
        self.assertIn("Ana Souza", body)
        self.assertIn("ana@escritorio.com", body)

    def test_cadastrar_usuario_simulado(self):
        response = self.client.post("/usuarios", data={
            "new_full_name": "Novo", "new_email": "novo@escritorio.com", "new_password": "segredo",
        })
        body = response.get_data(as_text=True)
        self.assertIn("Usuário Criado (Simulado)", body)
        self.assertIn("Funcionalidade de Cadastro (Backend Necessário)", body)
        self.mock_table_methods.insert.assert_not_called()


if __name__ == "__main__":
    unittest.main()
