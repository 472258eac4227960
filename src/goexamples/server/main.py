"""
Go examples hover API server.
"""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.routing import APIRoute

from goexamples import __version__
from goexamples.core.provider import Extension
from goexamples.logging_setup import setup_logging
from goexamples.server import deps
from goexamples.server.config import get_service_config
from goexamples.server.routes import hover


def print_routes(app: FastAPI):
    print("\n" + "=" * 60)
    print("Go Examples API Routes")
    print("=" * 60)

    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(route.methods - {"HEAD", "OPTIONS"})
            routes.append((methods, route.path, route.name))

    routes.sort(key=lambda r: (r[1], r[0]))

    for methods, path, name in routes:
        print(f"  {methods:8} {path:40} → {name}")

    print("=" * 60 + "\n")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(get_service_config().log_level)
    print_routes(app)

    host = deps.ServiceHost()
    async with httpx.AsyncClient(follow_redirects=True) as client:
        await Extension(host, client=client).start()
        deps.set_host(host)
        try:
            yield
        finally:
            deps.set_host(None)


app = FastAPI(title="Go Examples API", lifespan=lifespan)

app.include_router(hover.router)


@app.get("/")
async def root():
    return {"name": "goexamples", "version": __version__}
