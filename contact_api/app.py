import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from motor.motor_asyncio import AsyncIOMotorCollection

from contact_api import docs
from contact_api.config import Settings
from contact_api.db.contacts import ContactRepository
from contact_api.db.mongo import check_connection, create_client, get_contacts_collection
from contact_api.routes import contacts, health

log = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, collection: Optional[AsyncIOMotorCollection] = None) -> FastAPI:
    """Build the contact API.

    With ``collection`` given the app uses it as is and never opens a client
    of its own. Otherwise a motor client is created at startup; a failed
    connection is logged and the app keeps serving (``/health`` reports it).
    """
    if settings is None:
        settings = Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        if collection is None:
            client = create_client(settings)
            app.state.storage_reachable = await check_connection(client)
            app.state.contacts = ContactRepository(get_contacts_collection(client, settings))
        try:
            yield
        finally:
            if client is not None:
                client.close()

    app = FastAPI(
        title=docs.TITLE,
        version=docs.VERSION,
        description=docs.DESCRIPTION,
        docs_url=docs.DOCS_URL,
        openapi_url=docs.OPENAPI_URL,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    # last known result of a storage ping; None until one has run
    app.state.storage_reachable = None
    if collection is not None:
        app.state.contacts = ContactRepository(collection)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(contacts.router)
    app.include_router(health.router)

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        mapped = contacts.VALIDATION_ERRORS.get(request.scope.get("endpoint"))
        if mapped is None:
            return await request_validation_exception_handler(request, exc)
        status_code, message = mapped
        log.warning(f"Rejected body on {request.method} {request.url.path}: {exc.errors()}")
        return PlainTextResponse(message, status_code=status_code)

    docs.install_openapi(app)

    # Mounted last so the API routes always win over files of the same name
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        log.warning(f"Static directory {settings.static_dir} not found, front-end disabled")

    return app
