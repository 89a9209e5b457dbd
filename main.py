import time
from typing import List, Optional

import uvicorn
from fastapi import Depends, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config import settings
from logging_setup import logger, setup_logging
from message_store import MessageStore, NotFoundError, ValidationError
from Models.ErrorResponse import ErrorResponse
from Models.Message import Message
from Models.MessagePayload import MessagePayload

setup_logging()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


def get_store(request: Request) -> MessageStore:
    return request.app.state.store


def create_app(store: Optional[MessageStore] = None) -> FastAPI:
    """Builds the FastAPI app. Each app owns its own MessageStore."""
    app = FastAPI(
        title="Message Store Service",
        description="Create, read, update and delete short text messages held in memory.",
        version="1.0.0"
    )
    app.state.store = store if store is not None else MessageStore()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
        return response

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.info(f"Rejected message content: {request.method} {request.url.path}")
        return JSONResponse(status_code=400, content={"error": exc.detail})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.info(f"Message not found. id: {exc.message_id}")
        return JSONResponse(status_code=404, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Malformed request body: {request.method} {request.url.path}")
        return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object"})

    @app.get("/")
    async def root():
        return {"hello": "world"}

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    @app.post("/messages", response_model=Message, status_code=201, responses=ERROR_RESPONSES, summary="Creates a message")
    async def create_message(payload: MessagePayload, store: MessageStore = Depends(get_store)):
        return store.create(payload.content)

    @app.get("/messages", response_model=List[Message], summary="Lists all messages")
    async def list_messages(store: MessageStore = Depends(get_store)):
        return store.all()

    @app.get("/messages/{message_id}", response_model=Message, responses=ERROR_RESPONSES, summary="Returns one message")
    async def get_message(message_id: str, store: MessageStore = Depends(get_store)):
        return store.get(message_id)

    @app.put("/messages/{message_id}", response_model=Message, responses=ERROR_RESPONSES, summary="Replaces a message's content")
    async def update_message(message_id: str, payload: MessagePayload, store: MessageStore = Depends(get_store)):
        return store.update(message_id, payload.content)

    @app.delete("/messages/{message_id}", status_code=204, response_class=Response, responses=ERROR_RESPONSES, summary="Deletes a message")
    async def delete_message(message_id: str, store: MessageStore = Depends(get_store)):
        store.delete(message_id)
        return Response(status_code=204)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        app="main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
