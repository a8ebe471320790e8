# painel/config.py
import os
from dotenv import load_dotenv

load_dotenv()


class ConfigError(RuntimeError):
    """Configuração obrigatória ausente."""


# Configurações do Supabase
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

# Usuário do painel (opcional). Se definido, o cliente faz login ao iniciar.
PAINEL_USER_EMAIL = os.getenv("PAINEL_USER_EMAIL")
PAINEL_USER_PASSWORD = os.getenv("PAINEL_USER_PASSWORD")

# Configurações do Flask
FLASK_SECRET_KEY = os.getenv("FLASK_SECRET_KEY", "dev-secret-change-later")
PAINEL_PORT = int(os.getenv("PAINEL_PORT", "5000"))

# Status que não entram no "Total a Receber" (ex: "Cancelado"), separados por vírgula
STATUS_IGNORADOS = [
    s.strip() for s in os.getenv("PAINEL_STATUS_IGNORADOS", "").split(",") if s.strip()
]
