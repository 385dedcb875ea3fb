"""
Logging de la aplicación.

main.py llama a `configure_logging` al arrancar; cada módulo usa su propio
`logging.getLogger(__name__)`.
"""
import logging
import sys

FORMATO = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FORMATO_FECHA = "%Y-%m-%d %H:%M:%S"

# Nombre del handler propio, para no duplicarlo si se configura dos veces
_HANDLER = "autogestion"


def configure_logging(level: str = "INFO") -> logging.Logger:
    root = logging.getLogger()
    try:
        root.setLevel(level.upper())
    except ValueError:
        root.setLevel(logging.INFO)

    if not any(h.get_name() == _HANDLER for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER)
        handler.setFormatter(logging.Formatter(FORMATO, FORMATO_FECHA))
        root.addHandler(handler)
    return root
