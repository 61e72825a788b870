"""
said API Server.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from said.server.deps import get_interpreter
from said.server.routes import catalogue, grammars, interpret


def print_routes(app: FastAPI):
    print("\n" + "=" * 60)
    print("said API Routes")
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
    # Build the catalogue up front so a bad grammar fails at startup
    get_interpreter()
    print_routes(app)
    yield


app = FastAPI(title="said API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(interpret.router)
app.include_router(catalogue.router)
app.include_router(grammars.router)


@app.get("/")
async def root():
    return {"name": "said API", "version": "0.1.0"}


def run():
    import uvicorn
    uvicorn.run("said.server.main:app", host="127.0.0.1", port=8000)
