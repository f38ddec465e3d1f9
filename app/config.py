from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    database_url: str = "sqlite:///./companies.db"
    homepage_timeout: float = 15.0
    deep_page_timeout: float = 10.0
    user_agent: str = "Mozilla/5.0"
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _homepage_timeout_is_longer(self) -> "Settings":
        if self.homepage_timeout <= self.deep_page_timeout:
            raise ValueError("homepage_timeout must be longer than deep_page_timeout")
        return self
