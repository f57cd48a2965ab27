"""FastAPI application entrypoint.

This file exposes the tilt maze game over HTTP for the browser client, which
does the rendering and input capture.

Run locally with:
    uvicorn api_app:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from session_api.session_router import router as session_router

logging.basicConfig(level=logging.INFO)
log = logging.getLogger("tilt-maze")

app = FastAPI(title="Tilt Maze Server", version="0.1.0")

# Enable CORS for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # For development, allow all. In production, specify the client origin
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(session_router)


@app.get("/health")
def health():
    return {"ok": True}


log.info("Tilt maze API ready")
