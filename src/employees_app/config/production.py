import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", Config.MYSQL_DATABASE_URI)
SQLALCHEMY_TRACK_MODIFICATIONS = Config.SQLALCHEMY_TRACK_MODIFICATIONS

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
