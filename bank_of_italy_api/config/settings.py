from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = 'https://tassidicambio.bancaditalia.it/terzevalute-wf-web/rest/v1.0'


class Settings(BaseSettings):
	BASE_URL: str = DEFAULT_BASE_URL
	LANGUAGE: str = 'en'

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(
		env_prefix='BOI_', env_file='.env', case_sensitive=False, extra='ignore'
	)


@lru_cache
def get_settings() -> Settings:
	return Settings()
