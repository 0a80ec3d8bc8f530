from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    OPENAI_API_KEY: str | None = None
    OPENAI_BASE_URL: str | None = None
    OPENAI_ORG: str | None = None

    LLM_MODEL: str = "gpt-4o-mini"
    # Deterministic generation controls for the fallback classifier
    TEMPERATURE: float = 0.0
    MAX_OUTPUT_TOKENS: int = 256

    # Rule engine: stop scanning once the running best exceeds this
    SHORT_CIRCUIT_CONFIDENCE: float = 0.95
    # Messages longer than this are rejected at the HTTP edge
    MAX_MESSAGE_CHARS: int = 2000

    # Fallback classifier is consulted only below this rule confidence
    FALLBACK_ENABLED: bool = False
    FALLBACK_MIN_CONFIDENCE: float = 0.7

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    log_dir: str = "logs"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
