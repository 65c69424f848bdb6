from util.enums import Provider


class InternalURIs:
    HEALTH = "/health"
    API = "/api"
    VERIFY = API + "/verify"


class ExternalURIs:
    CLAUDE_MESSAGES = "https://api.anthropic.com/v1/messages"
    GEMINI_GENERATE = (
        "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
    )
    GROQ_CHAT = "https://api.groq.com/openai/v1/chat/completions"
    OPENROUTER_CHAT = "https://openrouter.ai/api/v1/chat/completions"


# Order in which providers are attempted in auto mode
PROVIDER_PRIORITY: tuple[Provider, ...] = (
    Provider.CLAUDE,
    Provider.GEMINI,
    Provider.GROQ,
    Provider.OPENROUTER,
)

AUTO_MODEL = "auto"
LOCAL_FALLBACK_MODEL = "local-fallback"

MAX_RAW_RESPONSE_CHARS = 1000
MAX_ERROR_BODY_CHARS = 500
MAX_FALLBACK_SENTENCES = 8
