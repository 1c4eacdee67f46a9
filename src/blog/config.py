import os
from dotenv import load_dotenv

load_dotenv()

SETTINGS_PATH = os.getenv("BLOG_SETTINGS", "settings.toml")

# DEBUG, INFO, WARNING, ...
LOG_LEVEL = os.getenv("BLOG_LOG_LEVEL", "INFO")
