"""Tests for environment settings and name helpers."""
from modelwarp.config import DEFAULT_SAMPLE_LIMIT, Settings
from modelwarp.utils import dataset_name_from_path, sanitize_name


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("MODELWARP_SAMPLE_LIMIT", "MODELWARP_LOG_LEVEL", "MODELWARP_CSV_ENCODING"):
            monkeypatch.delenv(name, raising=False)

        assert Settings.from_env() == Settings(sample_limit=DEFAULT_SAMPLE_LIMIT, log_level="WARNING", csv_encoding="utf-8")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MODELWARP_SAMPLE_LIMIT", "50")
        monkeypatch.setenv("MODELWARP_LOG_LEVEL", "debug")
        monkeypatch.setenv("MODELWARP_CSV_ENCODING", "latin-1")

        settings = Settings.from_env()

        assert settings.sample_limit == 50
        assert settings.log_level == "DEBUG"
        assert settings.csv_encoding == "latin-1"

    def test_invalid_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("MODELWARP_SAMPLE_LIMIT", "lots")
        monkeypatch.setenv("MODELWARP_LOG_LEVEL", "chatty")

        settings = Settings.from_env()

        assert settings.sample_limit == DEFAULT_SAMPLE_LIMIT
        assert settings.log_level == "WARNING"


class TestNames:

    def test_sanitize_name(self):
        assert sanitize_name("Q1 Orders-2024") == "q1_orders_2024"
        assert sanitize_name("2024 sales") == "d_2024_sales"
        assert sanitize_name("") == "unnamed"
        assert sanitize_name("***") == "unnamed"
        assert sanitize_name("2024 Sales (EU)") == "d_2024_sales_eu"
        assert sanitize_name("Caf\u00e9 orders") == "caf_orders"

    def test_dataset_name_from_path(self):
        assert dataset_name_from_path("exports/Q1 Orders-2024.csv") == "q1_orders_2024"
