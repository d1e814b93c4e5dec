from dependency_injector import providers

from src.application.container import Container
from src.infrastructure.config.settings import Settings


def test_db_client_receives_async_url_from_settings(tmp_path):
    root = Container()
    root.config.override(providers.Object(
        Settings(db_url=f"sqlite:///{tmp_path / 'plain.db'}")))

    db_client = root.db_client()

    assert db_client.is_sqlite
    assert db_client._db_url == f"sqlite+aiosqlite:///{tmp_path / 'plain.db'}"


def test_settings_module_builds_no_instance_on_import():
    import src.infrastructure.config.settings as settings_module

    assert not hasattr(settings_module, "settings")
