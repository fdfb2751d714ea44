"""
Client credentials for the Wunderlist API.

Credentials are set once at startup, either explicitly or from the environment, and read-only afterwards.
"""
from dotenv import load_dotenv
from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

from wunderlist.constants import ACCESS_TOKEN_HEADER, CLIENT_ID_HEADER


class Settings(BaseSettings):
    """Credentials loaded from environment variables (``WUNDERLIST_CLIENT_ID``, ``WUNDERLIST_ACCESS_TOKEN``)."""

    model_config = SettingsConfigDict(
        env_prefix='WUNDERLIST_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    CLIENT_ID: str = ""
    ACCESS_TOKEN: str = ""


class Configurator:
    def __init__(self, client_id: str = "", auth_token: str = ""):
        self._client_id = client_id
        self._auth_token = auth_token

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> 'Configurator':
        settings = settings or Settings()
        return cls(client_id=settings.CLIENT_ID, auth_token=settings.ACCESS_TOKEN)

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> 'Configurator':
        if dotenv_path is not None:
            load_dotenv(dotenv_path, override=True)
        return cls.from_settings(Settings())

    def set_client_id(self, client_id: str) -> None:
        self._client_id = client_id

    def get_client_id(self) -> str:
        return self._client_id

    def set_auth_token(self, token: str) -> None:
        self._auth_token = token

    def get_auth_token(self) -> str:
        return self._auth_token

    @property
    def is_configured(self) -> bool:
        return bool(self._client_id) and bool(self._auth_token)

    def get_config(self) -> dict[str, str]:
        """Headers attached to every API call."""
        return {ACCESS_TOKEN_HEADER: self._auth_token, CLIENT_ID_HEADER: self._client_id}

    def __repr__(self):
        return f'Configurator(client_id={self._client_id!r}, configured={self.is_configured})'


_configurator = Configurator()


def get_configurator() -> Configurator:
    """Process-wide configurator used when a service is built without an explicit one."""
    logger.debug(f'Using shared configurator (configured={_configurator.is_configured})')
    return _configurator
