from .config import *  # noqa: F401,F403

JWT_SECRET = "test-secret-key-with-enough-length-for-hs256"
LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
