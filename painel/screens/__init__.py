# painel/screens/__init__.py

from .configuracoes import ConfiguracoesState
from .relatorios import RelatoriosState
from .usuarios import UsuariosState
