import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, LOG_LEVEL

# Routers
from routers.health import router as health_router
from routers.marking import router as marking_router
from routers.practice import router as practice_router

logger = logging.getLogger("practice-engine")
logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(title="Middle School Maths – Practice Engine API")

# Allow calls from the Next.js dev server and production site
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(practice_router)  # /grades/{grade}/topics...
app.include_router(marking_router)  # /evaluate, /check, /format
app.include_router(health_router)  # /health/...
