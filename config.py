# config.py
from __future__ import annotations

import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma-separated; defaults cover the Next.js dev server and production site.
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    ).split(",")
    if o.strip()
]

# Longest free-text answer the /check endpoint will grade.
ANSWER_LEN_LIMIT = int(os.getenv("ANSWER_LEN_LIMIT", "100"))
