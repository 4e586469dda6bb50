import os
import tempfile

SECRET_KEY = "test-secret"

DATA_DIR = os.getenv("DATA_DIR", os.path.join(tempfile.gettempdir(), "kiddytime-test-data"))

DEBUG = False
TESTING = True

SESSION_LIFETIME_HOURS = 24
SESSION_COOKIE_SECURE = False
