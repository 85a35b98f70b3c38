"""Registry of known helpers and the settings each one requires.

Order matters: the configuration report lists components in this order.
"""

from cafeflow.core.validation.schemas import ComponentSpec, SettingRequirement

LLM_REQUIREMENT = SettingRequirement(lookup_keys=('GEMINI_API_KEY', 'GROQ_API_KEY'))


def _ai_helper_spec(name: str, description: str) -> ComponentSpec:
    return ComponentSpec(name=name, required_settings=(LLM_REQUIREMENT,), description=description)


HELPER_SPECS: tuple[ComponentSpec, ...] = (
    ComponentSpec(name='reddit', description='Reddit public API (no credentials needed)'),
    ComponentSpec(
        name='email',
        required_settings=(
            SettingRequirement(lookup_keys=('SMTP_USERNAME',)),
            SettingRequirement(lookup_keys=('SMTP_PASSWORD',)),
        ),
        description='SMTP email sending',
    ),
    ComponentSpec(
        name='telegram',
        required_settings=(SettingRequirement(lookup_keys=('TELEGRAM_BOT_TOKEN',)),),
        description='Telegram Bot API',
    ),
    ComponentSpec(
        name='twitter',
        required_settings=(SettingRequirement(lookup_keys=('X_BEARER_TOKEN',)),),
        description='X/Twitter API v2',
    ),
    ComponentSpec(
        name='google_drive',
        required_settings=(SettingRequirement(lookup_keys=('GD_CREDENTIALS_PATH',)),),
        description='Google Drive API',
    ),
    _ai_helper_spec('text_summarizer', 'LLM-powered text summarization'),
    _ai_helper_spec('sentiment_analyzer', 'LLM-powered sentiment analysis'),
    _ai_helper_spec('text_translator', 'LLM-powered text translation'),
    _ai_helper_spec('content_generator', 'LLM-powered content generation'),
    _ai_helper_spec('data_extractor', 'LLM-powered data extraction'),
    _ai_helper_spec('text_classifier', 'LLM-powered text classification'),
    _ai_helper_spec('topic_extractor', 'LLM-powered topic extraction'),
)
