import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from routers.attempts import router as attempts_router
from routers.exercises import router as exercises_router
from routers.health import router as health_router
from routers.marking import router as marking_router

logger = logging.getLogger("drills")
logging.basicConfig(level=config.LOG_LEVEL)

app = FastAPI(title="Arithmetic Drills – Exercise & Grading API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-api-key", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(marking_router)  # /evaluate, /canonicalize, /mark, /grade
app.include_router(exercises_router)  # /exercises
app.include_router(attempts_router)  # /attempts/...
app.include_router(health_router)  # /health/...
