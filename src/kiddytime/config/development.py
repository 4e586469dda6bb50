import os

SECRET_KEY = os.getenv("SESSION_SECRET", "kiddytime-secret-key")

# Folder holding users.json, children.json and entries.json
DATA_DIR = os.getenv("DATA_DIR", os.path.join(os.getcwd(), "data"))

DEBUG = True

SESSION_LIFETIME_HOURS = int(os.getenv("SESSION_LIFETIME_HOURS", "24"))
SESSION_COOKIE_SECURE = False
