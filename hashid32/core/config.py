from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Read as HASHID_SALT / HASHID_LOG_LEVEL; keys belonging to the host app are ignored
    model_config = SettingsConfigDict(env_file=".env", env_prefix="HASHID_", extra="ignore")

    # Salt used by get_codec(); empty means the canonical alphabets are used unshuffled
    SALT: str = ""

    # Checked by configure_logging(), so a bad value never breaks the import
    LOG_LEVEL: str = "INFO"

    @field_validator('LOG_LEVEL')
    def normalize_log_level(cls, v):
        return v.strip().upper()

settings = Settings()
