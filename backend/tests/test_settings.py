from src.config.settings import (
    Config,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
)
from src.fastapi_app import config


def test_get_config_by_environment():
    assert get_config("testing") is TestingConfig
    assert get_config("production") is ProductionConfig
    assert get_config("development") is DevelopmentConfig
    assert get_config("staging") is DevelopmentConfig


def test_testing_config_runs_in_memory():
    assert issubclass(TestingConfig, Config)
    assert TestingConfig.STORE_BACKEND == "memory"
    assert TestingConfig.JWT_SECRET


def test_app_uses_config_selected_by_app_env():
    # conftest sets APP_ENV=testing before the app module is imported
    assert config is TestingConfig
