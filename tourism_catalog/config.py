from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    catalog_api_url: str = ""
    catalog_api_key: str = ""
    booking_api_url: str = ""
    booking_api_key: str = ""
    max_sessions: int = 1000
    log_level: str = "INFO"
