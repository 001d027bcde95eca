# config/settings.py
import os
import sys
from dotenv import load_dotenv
from pydantic import ValidationError, Field
from pydantic_settings import BaseSettings
from util.enums import Environment


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field(..., validation_alias="APP_ENV")
    REDIS_URL: str = Field(..., validation_alias="REDIS_URL")
    PERSISTENCE_TTL_SECONDS: int = Field(
        ..., validation_alias="PERSISTENCE_TTL_SECONDS"
    )

    # CORS & Limits
    ALLOWED_ORIGIN: str = Field(..., validation_alias="ALLOWED_ORIGIN")
    RATE_LIMIT_TIMES: int = Field(..., validation_alias="RATE_LIMIT_TIMES")
    RATE_LIMIT_SECONDS: int = Field(..., validation_alias="RATE_LIMIT_SECONDS")
    MAX_FILE_MB: int = Field(..., validation_alias="MAX_FILE_MB")
    TRUST_PROXY: bool = Field(..., validation_alias="TRUST_PROXY")

    # Anthropic Settings
    ANTHROPIC_API_URL: str = Field(..., validation_alias="ANTHROPIC_API_URL")
    ANTHROPIC_MODEL: str = Field(..., validation_alias="ANTHROPIC_MODEL")
    ANTHROPIC_VERSION: str = Field(..., validation_alias="ANTHROPIC_VERSION")
    ANSWER_MAX_TOKENS: int = 1200
    ANSWER_TIMEOUT_SECONDS: float = 60.0

    # Retrieval
    EMBEDDING_MODEL_NAME: str = "sentence-transformers/all-MiniLM-L6-v2"
    EMBEDDING_BATCH_SIZE: int = 64
    # all-MiniLM-L6-v2 truncates at 256 word-pieces (~1000 chars of English)
    EMBEDDING_WINDOW_CHARS: int = Field(default=1000, ge=50)
    RETRIEVAL_TOP_K: int = Field(default=5, ge=1)

    # Logging knobs
    LOGGER_NAME: str = "pagecite"
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    LOG_TO_FILE: bool = Field(default=False, validation_alias="LOG_TO_FILE")
    LOG_DIR: str = Field(default="logs", validation_alias="LOG_DIR")
    LOG_FILE_NAME: str = Field(default="app.log", validation_alias="LOG_FILE_NAME")
    LOG_MAX_BYTES: int = Field(
        default=50 * 1024 * 1024, validation_alias="LOG_MAX_BYTES"
    )
    LOG_BACKUP_COUNT: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")

    # Prompts
    ANSWER_SYSTEM_PROMPT: str = (
        "You answer questions about an uploaded document using ONLY the provided context.\n"
        "\n"
        "OUTPUT: Return STRICT JSON only, no code fences, matching:\n"
        '{"answer":"string","citations":[{"page":number,"quote":"string","confidence":0.0-1.0}]}\n'
        "\n"
        "CITATION RULES:\n"
        '- "quote" MUST be a VERBATIM copy of text from the cited page (original wording and order).\n'
        '- "page" MUST be the page number shown in the context block the quote came from.\n'
        "- Do NOT paraphrase, merge text from different pages, or add ellipses inside a quote.\n"
        "- Prefer short quotes that carry the fact you state.\n"
        "\n"
        "GENERAL:\n"
        "- If the context is insufficient, say so in the answer and return an empty citations list.\n"
        "- No prose outside the JSON object.\n"
    )


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
