import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from app import config
from app.errors import TodoError, ValidationError
from app.models import TodoCreate, TodoResponse, TodoUpdate
from app.service import TodoService
from app.stores import TodoStore, select_store

logger = logging.getLogger(__name__)

router = APIRouter()


def get_service(request: Request) -> TodoService:
    return request.app.state.service


@router.get("/get/", response_model=List[TodoResponse], response_model_exclude_none=True, include_in_schema=False)
@router.get("/get", response_model=List[TodoResponse], response_model_exclude_none=True)
async def list_todos(service: TodoService = Depends(get_service)):
    return [TodoResponse(**todo) for todo in await service.list_todos()]


@router.post("/add/", response_model=TodoResponse, response_model_exclude_none=True, include_in_schema=False)
@router.post("/add", response_model=TodoResponse, response_model_exclude_none=True)
async def add_todo(payload: Optional[TodoCreate] = None, service: TodoService = Depends(get_service)):
    payload = payload or TodoCreate()
    todo = await service.create_todo(payload.task, payload.priority)
    return TodoResponse(**todo)


@router.delete("/delete")
@router.delete("/delete/")
async def delete_without_id():
    raise ValidationError("id required")


@router.delete("/delete/{todo_id}/", include_in_schema=False)
@router.delete("/delete/{todo_id}")
async def delete_todo(todo_id: str, service: TodoService = Depends(get_service)):
    await service.delete_todo(todo_id)
    return {"success": True}


@router.patch("/update/{todo_id}/", response_model=TodoResponse, response_model_exclude_none=True, include_in_schema=False)
@router.patch("/update/{todo_id}", response_model=TodoResponse, response_model_exclude_none=True)
async def update_todo(
    todo_id: str,
    payload: Optional[TodoUpdate] = None,
    service: TodoService = Depends(get_service),
):
    fields = {}
    if payload is not None:
        fields = {name: getattr(payload, name) for name in payload.model_fields_set}
    todo = await service.update_todo(todo_id, fields)
    return TodoResponse(**todo)


async def handle_todo_error(request: Request, exc: TodoError):
    if exc.status_code >= 500:
        logger.error("Error in %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "invalid request body"})


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("Error in %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def mount_client(app: FastAPI, client_dist: Path) -> None:
    """Serve the built client, falling back to index.html for SPA routes.

    Only GET is answered; other methods on unknown paths stay 404.
    """
    root = client_dist.resolve()
    index = root / "index.html"

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_client(full_path: str):
        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)
        return FileResponse(index)

    @app.api_route("/{full_path:path}", methods=["POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
    async def not_found(full_path: str):
        return JSONResponse(status_code=404, content={"error": "Not found"})


def create_app(
    store: Optional[TodoStore] = None,
    serve_client: Optional[bool] = None,
    client_dist: Optional[Path] = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = None
        if getattr(app.state, "service", None) is None:
            owned = await select_store(
                config.MONGO_URI,
                db_name=config.MONGO_DB,
                collection_name=config.MONGO_COLLECTION,
                timeout_ms=config.MONGO_TIMEOUT_MS,
            )
            app.state.service = TodoService(owned)
        yield
        if owned is not None:
            owned.close()
            app.state.service = None

    app = FastAPI(title="Todo Service", lifespan=lifespan)
    if store is not None:
        app.state.service = TodoService(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(TodoError, handle_todo_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
    app.include_router(router)

    if serve_client is None:
        serve_client = config.IS_PRODUCTION
    if serve_client:
        client_dist = client_dist or config.CLIENT_DIST
        if (client_dist / "index.html").is_file():
            mount_client(app, client_dist)
            logger.info("Serving client build from %s", client_dist)
        else:
            logger.warning("Client build not found at %s, static serving disabled", client_dist)

    return app


app = create_app()
