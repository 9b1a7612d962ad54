from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pool_tags.api.routers.pool_tags import router as pool_tags_router

app = FastAPI(title="Pool Tags API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pool_tags_router)
