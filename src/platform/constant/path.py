from pathlib import Path


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Log directory
LOG_DIR = BASE_DIR / 'logs'

# Alembic migrations
ALEMBIC_INI_PATH = BASE_DIR / 'alembic.ini'
