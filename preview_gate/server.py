"""
Uvicorn entry point.
The app sets the Date header itself (frontend header hygiene), so the server's own is switched off.
"""
import uvicorn

from preview_gate.core.config import settings

APP_IMPORT_PATH = "preview_gate.main:app"


def server_options(**overrides) -> dict:
    options = {
        "host": settings.uvicorn_host,
        "port": settings.uvicorn_port,
        "workers": settings.uvicorn_workers,
        "log_config": None,  # keep the JSON handlers from configure_logging
        "date_header": False,
        "server_header": False,
    }
    options.update(overrides)
    return options


def build_config(app=APP_IMPORT_PATH, **overrides) -> uvicorn.Config:
    return uvicorn.Config(app, **server_options(**overrides))


def main() -> None:
    uvicorn.run(APP_IMPORT_PATH, **server_options())


if __name__ == "__main__":
    main()
