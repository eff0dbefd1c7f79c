import os
from dotenv import load_dotenv

load_dotenv()

SECRET = os.getenv("SECRET")
DATABASE_URL = os.getenv("DATABASE_URL")
DB_ECHO = os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_LIFETIME_SECONDS = int(os.getenv("JWT_LIFETIME_SECONDS", 3600))
LOG_FILE = os.getenv("LOG_FILE", "Logs/app.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
