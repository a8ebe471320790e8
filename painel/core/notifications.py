# painel/core/notifications.py
from pydantic import BaseModel

DEFAULT = "default"
DESTRUCTIVE = "destructive"
WARNING = "warning"


class Toast(BaseModel):
    """Notificação curta para o usuário. Os handlers só devolvem; quem exibe é a camada web."""
    title: str
    description: str = ""
    variant: str = DEFAULT  # "default", "destructive", "warning"


def success_toast(title: str, description: str = "") -> Toast:
    return Toast(title=title, description=description)


def error_toast(description: str, title: str = "Erro") -> Toast:
    return Toast(title=title, description=description, variant=DESTRUCTIVE)


def warning_toast(title: str, description: str) -> Toast:
    return Toast(title=title, description=description, variant=WARNING)


def unexpected_error_toast(description: str = "Ocorreu um erro inesperado. Tente novamente.") -> Toast:
    return error_toast(description, title="Erro inesperado")
