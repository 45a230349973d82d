import os

from .config import *  # noqa: F401,F403

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
