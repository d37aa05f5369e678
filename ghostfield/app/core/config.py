"""
Application configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.
Production: set env vars in the platform (Docker, K8s, etc.); .env is optional.

All GhostField configs and protocol constants are centralized here.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: ghostfield/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

# Load .env into environment BEFORE pydantic reads. When .env doesn't exist
# (prod), this is a no-op; platform env vars are used.
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "GhostField"
    app_version: str = "1.0.0"
    port: int = 8001

    # Obfuscation key. Must be a stable per-application secret, never user input.
    secret_key: str = "change-me-ghostfield-secret"

    # Served forms
    sigil_enabled: bool = True
    sigil_name: str = "sigil"
    seed_default_honeypots: bool = True

    # IANA zone used for "now" (empty = server local time)
    timezone: str = ""

    # Logging
    log_level: str = "INFO"
    # Bot verdicts (validator + form routes); WARNING silences routine rejections
    verdict_log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


# --- Constants (non-env, wire contract) ---

# Wire ids start with a letter so they are valid HTML ids / CSS selectors
WIRE_ID_PREFIX: str = "ID"

# Literal prefix of the JS handshake proof; the browser script must use the same
SIGIL_PROOF_PREFIX: str = "tck_"
DEFAULT_SIGIL_NAME: str = "sigil"
SIGIL_TIME_SUFFIX: str = "_time"

# Hour buckets; a submission may straddle one boundary
TIME_BUCKET_FORMAT: str = "%Y-%m-%d %H"
BUCKET_TOLERANCE_SECONDS: int = 3600

FIELD_NAME_PATTERN: str = r"^[A-Za-z0-9_-]+$"
DEFAULT_INPUT_TYPE: str = "text"

# Honeypot catalog: (legit, name, type, placeholder). Names only need to look
# plausible to a scraper.
DEFAULT_FIELDS: list[tuple[bool, str, str, str]] = [
    (False, "csrf_token", "text", "securized timestamp token"),
    (False, "internal_reference", "number", "User subscriber number"),
    (False, "order_date", "date", "Date of order"),
    (False, "user_date_of_birth", "date", "User date of birth"),
    (False, "user_subscriber_number", "text", "User subscriber number"),
    (False, "user_gender", "text", "User gender [male/female]"),
    (False, "user_first_name", "text", "User first name"),
    (False, "user_last_name", "text", "User last name"),
    (False, "user_middle_name", "text", "User middle name"),
    (False, "user_company", "text", "User company name"),
    (False, "user_email", "email", "User email"),
    (False, "user_password", "password", "User password"),
    (False, "user_password_confirm", "password", "User confirm password"),
    (False, "user_address", "text", "User main address"),
    (False, "user_city", "text", "User address city"),
    (False, "user_zip", "text", "User address zip code"),
    (False, "user_country", "text", "User address country"),
    (False, "user_phone_number", "phone", "User phone number"),
    (False, "user_fax_number", "phone", "User fax number"),
    (False, "user_mobile_number", "phone", "User mobile phone number"),
    (False, "user_linkedin_url", "text", "User LinkedIn Account"),
    (False, "user_facebook_url", "text", "User Facebook Account"),
    (False, "user_twitter_url", "text", "User Twitter/X Account"),
    (False, "user_bluesky_url", "text", "User Bluesky Account"),
    (False, "user_youtube_url", "text", "User YouTube Account"),
    (False, "search_query", "text", "Search query"),
    (False, "input_title", "text", "Selected title"),
    (False, "input_recipient", "text", "Selected recipient"),
    (False, "input_message", "text", "Your message here"),
    (False, "promotional_code", "text", "Set your promotional code here if needed"),
    (False, "sms_code_confirm", "text", "A code from SMS mobile phone number check"),
    (False, "rgpd_accept", "checkbox", "Accept the use of personal data"),
    (False, "third_party_cookies_accept", "checkbox", "Accept the use of third-party cookies"),
    (False, "adult_confirm", "checkbox", "Are you an adult (confirm 18+)"),
]

# Legit fields of the contact form served by the API
CONTACT_FORM_FIELDS: list[tuple[bool, str, str, str]] = [
    (True, "name", "text", "Your name"),
    (True, "email", "email", "you@example.com"),
    (True, "message", "text", "How can we help?"),
]
