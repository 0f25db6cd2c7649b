import os
from pydantic import BaseModel


class Settings(BaseModel):
    min_text_length: int = int(os.getenv("PARSER_MIN_TEXT_LENGTH", "50"))
    log_level: str = os.getenv("PARSER_LOG_LEVEL", "INFO")
    output_dir: str = os.getenv("PARSER_OUTPUT_DIR", "data/processed")
    cors_origins: str = os.getenv("PARSER_CORS_ORIGINS", "*")


def get_settings() -> Settings:
    return Settings()
