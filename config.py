from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Configuration for the message service.
    Reads environment variables with the 'MESSAGES_' prefix (e.g. MESSAGES_PORT).
    """
    model_config = SettingsConfigDict(env_prefix='MESSAGES_')

    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"

    PORT: int = 3000

    RELOAD: bool = False


settings = Settings()
