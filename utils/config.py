# utils/config.py

import os
from dotenv import load_dotenv

load_dotenv()

# defaults for the HTTP surface; engine functions take these as arguments
CONTEXT_RADIUS = int(os.getenv("REVIEW_CONTEXT_RADIUS", "3"))
MERGE_GAP = int(os.getenv("REVIEW_MERGE_GAP", "1"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_STRUCTURED = os.getenv("LOG_STRUCTURED", "false").lower() in ("1", "true", "yes")
