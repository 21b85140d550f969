from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False, env_file=".env", extra="ignore")

    ledger_file: str = "ledger.json"
    database_url: str = "sqlite+pysqlite:///./ledger_audit.db"
    cors_origins: str = "http://localhost:5173"

    audit_username: str = "local"
    log_level: str = "INFO"


settings = Settings()
