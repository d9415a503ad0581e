from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "typetrainer"
    db_username: str = "typetrainer"
    db_password: str = "secret"
    db_pool_max_size: int = 10

    pdf_engine: str = "pdftotext"
    pdftotext_command: str = "pdftotext"
    pdf_temp_dir: str | None = None

    summarization_provider: str = "openai"
    summarization_api_key: str = ""
    summarization_base_url: str = ""
    summarization_model_name: str = "gpt-4o-mini"
    summarization_timeout_seconds: int = 30
    summarization_temperature: float = 0.3

    @property
    def db_conninfo(self) -> str:
        return (
            f"host={self.db_host} "
            f"port={self.db_port} "
            f"dbname={self.db_database} "
            f"user={self.db_username} "
            f"password={self.db_password}"
        )
