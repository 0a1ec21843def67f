import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from acme_dashboard.core.config import settings

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title="Acme Dashboard Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

from acme_dashboard.api.v1.router import api_router
app.include_router(api_router, prefix="/api/v1")

@app.get("/")
def read_root():
    return {"message": "Welcome to Acme Dashboard Backend API"}
