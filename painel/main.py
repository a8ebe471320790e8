# painel/main.py
import sys

from painel import config
from painel.core.db import get_supabase_client
from painel.web.web_setup import setup_web_app

print("DEBUG: Iniciando painel/main.py (Execução Global)")

# --- Setup da Aplicação no Escopo Global (executado uma vez ao carregar o módulo) ---
try:
    supabase_client = get_supabase_client()
    print("DEBUG: Cliente Supabase inicializado.")

    web_config = {
        "SUPABASE_CLIENT": supabase_client,
        "FLASK_SECRET_KEY": config.FLASK_SECRET_KEY,
        "STATUS_IGNORADOS": config.STATUS_IGNORADOS,
    }
    print(f"DEBUG: Configurações do painel criadas: {web_config.keys()}")

    flask_app = setup_web_app(web_config)

    # O Gunicorn serve esta variável: gunicorn painel.main:wsgi_app
    wsgi_app = flask_app
    print("DEBUG: Variável wsgi_app definida como a aplicação Flask. Aplicação WSGI pronta.")

except Exception as e:
    print(f"ERROR: Erro crítico durante a inicialização em painel/main.py: {e}", file=sys.stderr)
    import traceback
    traceback.print_exc(file=sys.stderr)
    raise


if __name__ == "__main__":
    flask_app.run(host="0.0.0.0", port=config.PAINEL_PORT)
