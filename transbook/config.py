# TRANSBOOK/backend/transbook/config.py

import os
from dotenv import load_dotenv
from pathlib import Path

# Trouve le chemin absolu du dossier contenant ce fichier (transbook/)
BASE_DIR = Path(__file__).parent.absolute()
env_path = BASE_DIR / '.env'

# Charge les variables depuis le fichier .env
if env_path.exists():
    load_dotenv(dotenv_path=env_path)
    print(f"✅ Fichier .env chargé depuis: {env_path}")

# ============================================
# CONFIGURATION ENVIRONNEMENT
# ============================================
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

# ============================================
# CONFIGURATION BASE DE DONNÉES
# ============================================
DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    # En production, on veut lever une erreur
    if ENVIRONMENT == "production":
        raise ValueError("DATABASE_URL must be set in production")
    print("⚠️  DATABASE_URL non définie, utilisation de SQLite local")
    DATABASE_URL = "sqlite:///./transbook.db"

# ============================================
# CONFIGURATION JWT / AUTH
# ============================================
SECRET_KEY = os.getenv("SECRET_KEY", "change_this_secret_key_in_production")
if SECRET_KEY == "change_this_secret_key_in_production" and ENVIRONMENT == "production":
    raise ValueError("SECRET_KEY must be changed in production")

ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))  # 24 heures par défaut

# ============================================
# CONFIGURATION CORS (Frontend)
# ============================================
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")

# ============================================
# LOGGING
# ============================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

