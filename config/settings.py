# config/settings.py
import os
import sys
from dotenv import load_dotenv
from pydantic import SecretStr, ValidationError, Field
from pydantic_settings import BaseSettings
from util.enums import Environment, Provider


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()


class Settings(BaseSettings):
    # App
    APP_ENV: Environment = Field(Environment.DEV, validation_alias="APP_ENV")
    HOST: str = Field("127.0.0.1", validation_alias="HOST")
    PORT: int = Field(3001, validation_alias="PORT")
    LOG_LEVEL: str = Field("INFO", validation_alias="LOG_LEVEL")

    # CORS
    ALLOWED_ORIGIN: str = Field("*", validation_alias="ALLOWED_ORIGIN")

    # Provider credentials (absence disables the provider)
    CLAUDE_API_KEY: SecretStr | None = Field(None, validation_alias="CLAUDE_API_KEY")
    GEMINI_API_KEY: SecretStr | None = Field(None, validation_alias="GEMINI_API_KEY")
    GROQ_API_KEY: SecretStr | None = Field(None, validation_alias="GROQ_API_KEY")
    OPENROUTER_API_KEY: SecretStr | None = Field(
        None, validation_alias="OPENROUTER_API_KEY"
    )

    # Provider models
    CLAUDE_MODEL: str = Field("claude-sonnet-4-20250514", validation_alias="CLAUDE_MODEL")
    ANTHROPIC_VERSION: str = Field("2023-06-01", validation_alias="ANTHROPIC_VERSION")
    CLAUDE_MAX_TOKENS: int = Field(4096, validation_alias="CLAUDE_MAX_TOKENS")
    GEMINI_MODEL: str = Field("gemini-1.5-flash", validation_alias="GEMINI_MODEL")
    GROQ_MODEL: str = Field("llama-3.3-70b-versatile", validation_alias="GROQ_MODEL")
    OPENROUTER_MODEL: str = Field(
        "mistralai/mistral-7b-instruct:free", validation_alias="OPENROUTER_MODEL"
    )
    PROVIDER_TEMPERATURE: float = Field(0.2, validation_alias="PROVIDER_TEMPERATURE")

    # Per-attempt limits
    PROVIDER_TIMEOUT_SECONDS: float = Field(
        60.0, gt=0, validation_alias="PROVIDER_TIMEOUT_SECONDS"
    )
    PROVIDER_CONNECT_TIMEOUT_SECONDS: float = Field(
        5.0, gt=0, validation_alias="PROVIDER_CONNECT_TIMEOUT_SECONDS"
    )

    def api_key(self, provider: Provider) -> str | None:
        secret: SecretStr | None = getattr(self, f"{provider.name}_API_KEY")
        if secret is None:
            return None
        value = secret.get_secret_value().strip()
        return value or None

    def available_models(self) -> dict[str, bool]:
        """Credential presence per provider. No network probing."""
        return {p.value: self.api_key(p) is not None for p in Provider}


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)
