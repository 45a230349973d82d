from .config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
