"""FastAPI application entry point.

Serves the todo page and a small JSON API over one controller. Every
mutating endpoint answers with the fresh projection, so the page can redraw
from the response alone.
"""

import logging

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from simple_todos import __version__
from simple_todos.config import Settings, configure_logging, get_settings
from simple_todos.controller import TodoController
from simple_todos.models import (
    Filter,
    FilterUpdate,
    HealthResponse,
    Projection,
    TaskCreate,
    TaskUpdate,
)
from simple_todos.persistence import TaskPersistence
from simple_todos.render import HtmlRenderer, render_page
from simple_todos.slots import FileSlotStore, SlotStore
from simple_todos.store import TaskStore

logger = logging.getLogger(__name__)


def get_controller(request: Request) -> TodoController:
    return request.app.state.controller


def get_renderer(request: Request) -> HtmlRenderer:
    return request.app.state.renderer


def create_app(settings: Settings | None = None, slots: SlotStore | None = None) -> FastAPI:
    """Build the application and its controller.

    ``slots`` defaults to a file slot store under ``settings.data_dir``.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if slots is None:
        slots = FileSlotStore(settings.data_dir)
    store = TaskStore(TaskPersistence(slots, settings.storage_key))
    logger.info("Loaded %d tasks from %s", len(store), settings.storage_key)

    app = FastAPI(
        title="Simple Todos",
        description="A single-user todo list with local persistence.",
        version=__version__,
    )
    app.state.renderer = HtmlRenderer()
    app.state.controller = TodoController(store, renderer=app.state.renderer)
    app.state.controller.refresh()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(OSError)
    async def storage_error(request: Request, exc: OSError) -> JSONResponse:
        logger.error("Could not save todos: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_507_INSUFFICIENT_STORAGE,
            content={"detail": "Could not save todos"},
        )

    @app.get("/api/health", response_model=HealthResponse, tags=["System"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse()

    @app.get("/", response_class=HTMLResponse, tags=["Page"])
    async def index(renderer: HtmlRenderer = Depends(get_renderer)) -> str:
        """The todo page around the latest rendered listing."""
        return render_page(renderer.html)

    @app.get("/listing", response_class=HTMLResponse, tags=["Page"])
    async def listing(renderer: HtmlRenderer = Depends(get_renderer)) -> str:
        """The latest rendered listing, for the page script to swap in."""
        return str(renderer.html)

    @app.get("/api/todos", response_model=Projection, tags=["Todos"])
    async def list_todos(
        filter: Filter | None = None,
        controller: TodoController = Depends(get_controller),
    ) -> Projection:
        """Projection for ``filter``, or the active filter."""
        return controller.get_projection(filter)

    @app.post(
        "/api/todos",
        response_model=Projection,
        status_code=status.HTTP_201_CREATED,
        tags=["Todos"],
    )
    async def add_todo(
        data: TaskCreate,
        response: Response,
        controller: TodoController = Depends(get_controller),
    ) -> Projection:
        """Add a task. A blank title changes nothing."""
        if controller.add(data.title) is None:
            response.status_code = status.HTTP_200_OK
        return controller.get_projection()

    @app.patch("/api/todos/{task_id}", response_model=Projection, tags=["Todos"])
    async def update_todo(
        task_id: str,
        data: TaskUpdate,
        controller: TodoController = Depends(get_controller),
    ) -> Projection:
        """Toggle and/or retitle a task."""
        if data.completed is not None:
            controller.toggle(task_id, data.completed)
        if data.title is not None:
            controller.edit(task_id, data.title)
        return controller.get_projection()

    @app.delete("/api/todos/{task_id}", response_model=Projection, tags=["Todos"])
    async def delete_todo(
        task_id: str,
        controller: TodoController = Depends(get_controller),
    ) -> Projection:
        """Delete a task."""
        controller.remove(task_id)
        return controller.get_projection()

    @app.post("/api/todos/clear-completed", response_model=Projection, tags=["Todos"])
    async def clear_completed(
        controller: TodoController = Depends(get_controller),
    ) -> Projection:
        """Remove every completed task."""
        controller.clear_completed()
        return controller.get_projection()

    @app.put("/api/filter", response_model=Projection, tags=["Todos"])
    async def set_filter(
        data: FilterUpdate,
        controller: TodoController = Depends(get_controller),
    ) -> Projection:
        """Change the active filter."""
        return controller.set_filter(data.filter)

    return app
