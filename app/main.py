"""FastAPI app: /health, /audit, /test, /update."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ninjascript_checker import __version__

from .config import get_host, get_port
from .routes import audit_router, compilation_router, health_router, update_router
from .startup import configure_logging, validate_config

configure_logging()

app = FastAPI(
    title="NinjaScript Checker API",
    description="Static audit, compilation simulation and modernization of NinjaTrader 8 scripts.",
    version=__version__,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(audit_router)
app.include_router(compilation_router)
app.include_router(update_router)


@app.on_event("startup")
def _validate_config() -> None:
    """Validate config at startup."""
    validate_config()


def run() -> None:
    """Serve the API with uvicorn using HOST/PORT from the environment."""
    import uvicorn

    uvicorn.run(app, host=get_host(), port=get_port())


if __name__ == "__main__":
    run()
