from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMConfig(BaseModel):
    """
    Everything a suggestion provider needs to reach its model.

    Built once from Settings and handed to SuggestionService/AgentManager so
    that neither component reads the process environment on its own.
    """

    provider: str = "gemini"
    model: str = "gemini-1.5-flash-latest"
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


class Settings(BaseSettings):
    PROJECT_NAME: str = "Resume Keyword Analyzer"
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    ALLOW_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    LLM_PROVIDER: str = "gemini"
    LL_MODEL: str = "gemini-1.5-flash-latest"
    LLM_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("LLM_API_KEY", "GEMINI_API_KEY"),
    )
    LLM_BASE_URL: Optional[str] = None
    LLM_TEMPERATURE: Optional[float] = None
    LLM_MAX_TOKENS: Optional[int] = None

    # Arbitrary prompt-size heuristic, not a tuned token budget.
    PROMPT_TEXT_LIMIT: int = 2000
    MISSING_KEYWORDS_LIMIT: int = 20

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def llm_config(self) -> LLMConfig:
        return LLMConfig(
            provider=self.LLM_PROVIDER,
            model=self.LL_MODEL,
            api_key=self.LLM_API_KEY,
            base_url=self.LLM_BASE_URL,
            temperature=self.LLM_TEMPERATURE,
            max_tokens=self.LLM_MAX_TOKENS,
        )


settings = Settings()
