# painel/tests/supabase_mock.py
from unittest.mock import MagicMock
from supabase import Client  # Para tipagem do mock


def make_supabase_mock():
    """
    Cria um mock do cliente Supabase.

    Todos os métodos encadeáveis (insert, select, update, delete, eq, order)
    retornam o mesmo mock, então .select().eq().order().execute() cai sempre
    em table_methods.execute. Retorna (cliente, table_methods).
    """
    mock_client = MagicMock(spec=Client)
    table_methods = MagicMock()
    for method in ("insert", "select", "update", "delete", "eq", "order", "limit"):
        getattr(table_methods, method).return_value = table_methods
    table_methods.execute.return_value = MagicMock(data=[])
    mock_client.table.return_value = table_methods

    # auth é criado no __init__ do Client, então não está no spec
    mock_client.auth = MagicMock()
    mock_client.auth.get_user.return_value = MagicMock(user=MagicMock(id="user-1"))
    return mock_client, table_methods


class FakeAPIError(Exception):
    """Imita os erros do supabase-py, que trazem a mensagem em .message."""
    def __init__(self, message):
        super().__init__(message)
        self.message = message
