# blog_api/config.py
import os
from dotenv import load_dotenv
load_dotenv()

DB_DSN = os.getenv("DATABASE_URL")
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", "1"))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", "10"))

# Size of each ranked list (top and bottom) behind /blog/interest-tags
INTEREST_TAGS_LIMIT = int(os.getenv("INTEREST_TAGS_LIMIT", "10"))

ADMIN_ROLE = "adminRole"
