import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Public URL of the web dashboard, used in bot replies and webhook registration
    APP_URL = data.get("APP_URL", "http://localhost:3000")

    # Invoice document header
    COMPANY_NAME = data.get("COMPANY_NAME", "Lead Desk")
    COMPANY_ADDRESS = data.get("COMPANY_ADDRESS", "")

    # AI completion API (OpenAI-compatible chat completions endpoint)
    AI_API_KEY = data.get("AI_API_KEY", "")
    AI_MODEL = data.get("AI_MODEL", "anthropic/claude-3-5-sonnet-20241022")
    AI_BASE_URL = data.get("AI_BASE_URL", "https://openrouter.ai/api/v1/chat/completions")
    AI_TIMEOUT = float(data.get("AI_TIMEOUT", 30.0))  # seconds

    # Outbound mail (Brevo transactional API); empty EMAIL_API_KEY switches to the dry-run mailer
    EMAIL_API_KEY = data.get("EMAIL_API_KEY", "")
    EMAIL_API_URL = data.get("EMAIL_API_URL", "https://api.brevo.com/v3/smtp/email")
    EMAIL_FROM_ADDRESS = data.get("EMAIL_FROM_ADDRESS", "")
    EMAIL_FROM_NAME = data.get("EMAIL_FROM_NAME", "") or COMPANY_NAME
    EMAIL_TIMEOUT = float(data.get("EMAIL_TIMEOUT", 10.0))  # seconds
    EMAIL_MAX_ATTEMPTS = int(data.get("EMAIL_MAX_ATTEMPTS", 3))

    # Chat bot
    TELEGRAM_BOT_TOKEN = data.get("TELEGRAM_BOT_TOKEN", "")
    TELEGRAM_TIMEOUT = float(data.get("TELEGRAM_TIMEOUT", 10.0))  # seconds

    # Mock lead generation
    LEAD_MAX_COUNT = int(data.get("LEAD_MAX_COUNT", 50))
