from typing import Annotated, Literal

from pydantic import BeforeValidator, computed_field

from cafeflow.core.configs.base_config import BaseConfig

ALL_HELPERS = [
    'reddit',
    'email',
    'telegram',
    'twitter',
    'google_drive',
    'text_summarizer',
    'sentiment_analyzer',
    'text_translator',
    'content_generator',
    'data_extractor',
    'text_classifier',
    'topic_extractor',
]


class AppConfig(BaseConfig):
    ENVIRONMENT: Literal['local', 'staging', 'production', 'testing'] = 'local'
    PROJECT_NAME: str = 'CafeFlow'

    # Logging
    LOG_LEVEL: str = 'DEBUG'
    LOG_HANDLERS: Annotated[list[Literal['stream', 'file']] | str, BeforeValidator(BaseConfig._parse_list)] = ['stream']

    # Helpers constructed by the worker (everything else is reported as inactive)
    HELPERS_ENABLED: Annotated[list[str] | str, BeforeValidator(BaseConfig._parse_list)] = list(ALL_HELPERS)

    # Email (SMTP)
    SMTP_HOST: str = 'smtp.gmail.com'
    SMTP_PORT: int = 587
    SMTP_USERNAME: str | None = None
    SMTP_PASSWORD: str | None = None
    SMTP_START_TLS: bool = True
    SMTP_FROM: str | None = None

    # Telegram
    TELEGRAM_BOT_TOKEN: str | None = None
    TELEGRAM_API_URL: str = 'https://api.telegram.org'

    # X / Twitter
    X_BEARER_TOKEN: str | None = None
    X_API_URL: str = 'https://api.x.com/2'

    # Reddit
    REDDIT_USER_AGENT: str = 'CafeFlow/1.0 (python; cafeflow)'

    # Google Drive
    GD_CREDENTIALS_PATH: str | None = None
    GD_TOKENS_DIR: str = 'tokens'

    # LLM
    LLM_DEFAULT_PROVIDER: Literal['gemini', 'groq'] = 'gemini'
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = 'gemini/gemini-2.0-flash'
    GROQ_API_KEY: str | None = None
    GROQ_MODEL: str = 'groq/llama-3.3-70b-versatile'
    LLM_FALLBACK_ENABLED: bool = True
    LLM_MAX_RETRIES: int = 2
    LLM_TIMEOUT: int = 120
    LLM_RATE_LIMIT_SECONDS: float = 1.0

    @computed_field  # type: ignore[misc]
    @property
    def llm_provider(self) -> Literal['gemini', 'groq', 'none']:
        """Pick the primary LLM provider: the configured default if its key is set, else any available."""
        available = {'gemini': bool(self.GEMINI_API_KEY), 'groq': bool(self.GROQ_API_KEY)}
        if available[self.LLM_DEFAULT_PROVIDER]:
            return self.LLM_DEFAULT_PROVIDER
        if available['gemini']:
            return 'gemini'
        if available['groq']:
            return 'groq'
        return 'none'

    # Temporal
    TEMPORAL_HOST: str = 'localhost:7233'
    TEMPORAL_NAMESPACE: str = 'default'
    TEMPORAL_TASK_QUEUE: str = 'cafeflow-queue'

    # Workflow Secret Authentication
    # When enabled, all workflow inputs must include a valid secret_key
    WORKFLOW_SECRET_ENABLED: bool = False
    WORKFLOW_SECRET_KEY: str | None = None  # Required when WORKFLOW_SECRET_ENABLED=True


app_config = AppConfig()
