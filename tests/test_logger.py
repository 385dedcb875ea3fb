import logging

import pytest

from app.core.logger import configure_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    nivel, handlers = root.level, list(root.handlers)
    yield root
    root.setLevel(nivel)
    root.handlers[:] = handlers


def test_configurar_dos_veces_no_duplica_handler(root_logger):
    configure_logging("INFO")
    configure_logging("DEBUG")
    propios = [h for h in root_logger.handlers if h.get_name() == "autogestion"]
    assert len(propios) == 1
    assert root_logger.level == logging.DEBUG


def test_nivel_desconocido_usa_info(root_logger):
    configure_logging("RUIDOSO")
    assert root_logger.level == logging.INFO
