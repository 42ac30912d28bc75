from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):  # type: ignore
    debug: bool = False
    log_level: str = 'INFO'

    backend_url: str = 'http://localhost:54321'
    backend_api_key: str = ''
    backend_timeout_seconds: float = 10.0

    sentry_dsn: str = ''
    sentry_environment: str = 'production'
    sentry_traces_sample_rate: float = 0.5

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )


settings = Settings()
