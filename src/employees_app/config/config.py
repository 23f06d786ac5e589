import os
import urllib.parse


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "employees-app-secret"

    # MySQL connection (production)
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "employees_db")

    _encoded_password = urllib.parse.quote_plus(DB_PASSWORD)
    MYSQL_DATABASE_URI = f"mysql+mysqlconnector://{DB_USER}:{_encoded_password}@{DB_HOST}:{DB_PORT}/{DB_NAME}"

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def mask_database_uri(uri: str) -> str:
    """Hide the password part of a SQLAlchemy URI for log output."""
    parts = urllib.parse.urlsplit(uri)
    if not parts.password:
        return uri
    netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
    return urllib.parse.urlunsplit(parts._replace(netloc=netloc))
