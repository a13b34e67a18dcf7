from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    APP_NAME: str = "Stylist API"
    APP_ENV: str = "dev"
    API_PREFIX: str = "/v1"
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    # OpenAI credentials; a missing key is fatal for any model call
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: Optional[str] = None
    # LLM tuning
    LLM_MODEL: str = "gpt-4o-mini"
    LLM_TIMEOUT_MS: int = 30000
    LLM_EXTRACT_TEMPERATURE: float = 0.2
    LLM_SUGGEST_TEMPERATURE: float = 1.1
    LLM_MAX_OUTPUT_TOKENS: int = 1500
    SUGGESTION_COUNT: int = 4

    @property
    def cors_origin_list(self) -> List[str]:
        val = self.CORS_ORIGINS
        if not val: return []
        if val == "*": return ["*"]
        return [v.strip() for v in val.split(",")]

settings = Settings()
