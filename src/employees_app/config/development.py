import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///employees.db")
SQLALCHEMY_TRACK_MODIFICATIONS = Config.SQLALCHEMY_TRACK_MODIFICATIONS

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

# Create tables on startup (idempotent) and add the demo employees to an empty table
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
