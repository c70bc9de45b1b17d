"""Tests pour Settings et la configuration du logging."""

from pathlib import Path

from loguru import logger

from src.config import Settings
from src.logging_config import configure_logging


class TestSettings:
    def test_valeurs_par_defaut(self, monkeypatch):
        monkeypatch.delenv("QAFEEDBACK_DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite:///qa_feedback.db"
        assert settings.api_port == 8000
        assert settings.log_file == Path("logs/qa_feedback.log")

    def test_surcharge_par_environnement(self, monkeypatch):
        monkeypatch.setenv("QAFEEDBACK_DATABASE_URL", "sqlite:///other.db")
        monkeypatch.setenv("QAFEEDBACK_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite:///other.db"
        assert settings.log_level == "DEBUG"


class TestConfigureLogging:
    def test_cree_le_fichier_de_log(self, test_settings):
        configure_logging(log_level="INFO", log_file=test_settings.log_file)
        logger.info("Message de test")
        logger.complete()

        assert test_settings.log_file.exists()
        logger.remove()
