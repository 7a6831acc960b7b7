import os

APP_TITLE = os.getenv("GOLFTOUR_APP_TITLE", "Golf Tours")

# hoyos por vuelta cuando la petición no lo indica
DEFAULT_TOTAL_HOLES = int(os.getenv("GOLFTOUR_TOTAL_HOLES", "18"))

LOG_LEVEL = os.getenv("GOLFTOUR_LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("GOLFTOUR_LOG_DIR", "")  # vacío -> solo consola

# servidor (golftour-serve)
HOST = os.getenv("GOLFTOUR_HOST", "127.0.0.1")
PORT = int(os.getenv("GOLFTOUR_PORT", "8000"))
