# mention_legale/interfaces/api/main.py
from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from mention_legale.infrastructure.config import get_settings

logging.basicConfig(
    level=logging.DEBUG if get_settings().debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from mention_legale.infrastructure.inpi_connection import fermer_registre, get_registre
    get_registre()  # valide la configuration au demarrage
    yield
    await fermer_registre()


app = FastAPI(
    title="Mention legale API",
    debug=False,  # JAMAIS True en production
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

from mention_legale.interfaces.api.routes.mention_routes import router as mention_router  # noqa: E402
from mention_legale.interfaces.api.routes.variables_routes import router as variables_router  # noqa: E402

app.include_router(mention_router, prefix="/api")
app.include_router(variables_router, prefix="/api")
