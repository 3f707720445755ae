from __future__ import annotations
import os
from pathlib import Path

def _origins(raw: str) -> list[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]

class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
    BASE_DIR = Path(__file__).resolve().parent
    # SQLite file in project directory
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR / 'classbuddy.db'}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # bearer credentials
    JWT_SECRET = os.getenv("JWT_SECRET", "dev-jwt-secret")
    JWT_ALGORITHM = "HS256"
    JWT_EXPIRES_DAYS = int(os.getenv("JWT_EXPIRES_DAYS", 10))

    CORS_ORIGINS = _origins(os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,https://classbuddy-one.vercel.app",
    ))

    # "today" for enrolled classes / upcoming deadlines
    TIMEZONE = os.getenv("TIMEZONE", "Asia/Kolkata")

    AUTH_RL_MAX = int(os.getenv("AUTH_RL_MAX", 10))
    AUTH_RL_WINDOW = int(os.getenv("AUTH_RL_WINDOW", 300))  # seconds

class DevConfig(BaseConfig):
    DEBUG = True
    SEED_DEPARTMENTS = [
        "Information Science and Engineering",
        "Computer Science and Engineering",
        "Electronics and Communication Engineering",
    ]

class TestConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET = "test-jwt-secret"
    TIMEZONE = "UTC"
    AUTH_RL_MAX = 1000
    SEED_DEPARTMENTS: list[str] = []

class ProdConfig(BaseConfig):
    DEBUG = False
    SEED_DEPARTMENTS = [
        "Information Science and Engineering",
        "Computer Science and Engineering",
        "Electrical and Electronics Engineering",
        "Electronics and Communication Engineering",
        "Mechanical Engineering",
        "Civil Engineering",
        "Artificial Intelligence and Machine Learning",
        "Data Science",
        "Cyber Security",
        "Information Technology",
        "Computer Applications",
        "Business Administration",
        "Master of Computer Applications",
        "Master of Business Administration",
        "Master of Science in Data Science",
        "Master of Technology in Data Science",
    ]

config_map = {
    "dev": DevConfig,
    "test": TestConfig,
    "prod": ProdConfig,
    "default": DevConfig,
}

YEAR_LABELS = ("FIRST", "SECOND", "THIRD", "FOURTH")
SECTION_NAMES = ("A", "B", "C", "D")
