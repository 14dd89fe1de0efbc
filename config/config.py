"""Settings shared by every environment, read from the process environment."""

import os

# Unset -> the container falls back to a fixed default secret and logs a warning.
JWT_SECRET = os.getenv("JWT_SECRET")
TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "24"))
AUTH_COOKIE_NAME = os.getenv("AUTH_COOKIE_NAME", "auth-token")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "school_system"),
    "pool_size": int(os.getenv("DB_POOL_SIZE", "10")),
    # 0 = unbounded wait queue
    "queue_limit": int(os.getenv("DB_QUEUE_LIMIT", "0")),
}

# Status of the login response when the user lookup hits a storage failure.
# 200 keeps the existing client contract; 503 is the stricter alternative.
LOGIN_STORAGE_ERROR_STATUS = int(os.getenv("LOGIN_STORAGE_ERROR_STATUS", "200"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
