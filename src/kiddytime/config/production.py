import os

SECRET_KEY = os.getenv("SESSION_SECRET", "please-set-SESSION_SECRET")

DATA_DIR = os.getenv("DATA_DIR", os.path.join(os.getcwd(), "data"))

DEBUG = False

SESSION_LIFETIME_HOURS = int(os.getenv("SESSION_LIFETIME_HOURS", "24"))
SESSION_COOKIE_SECURE = True
