from typing import Optional

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings as default_settings
from .logging_config import setup_logging
from .routes import relay_http_error, router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Connections relay (Supabase + Gemini)")
    app.state.settings = settings
    app.include_router(router)
    app.add_exception_handler(StarletteHTTPException, relay_http_error)

    @app.get("/")
    def root():
        return {"message": "Connections relay is running!"}

    return app


app = create_app()
