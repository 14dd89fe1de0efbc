"""Constants and defaults."""

DEFAULT_JWT_SECRET = "your-secret-key-change-in-production"
DEFAULT_TOKEN_TTL_HOURS = 24
AUTH_COOKIE_NAME = "auth-token"

DEFAULT_POOL_SIZE = 10
DEFAULT_QUEUE_LIMIT = 0

DEMO_MODE = "demo"
