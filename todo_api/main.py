import logging

from fastapi import Depends, FastAPI

from todo_api import config
from todo_api.dependencies import require_bearer_token
from todo_api.errors import register_error_handlers
from todo_api.routers import auth_router, project_router, todo_router

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# paths are matched exactly, "/projects/" is not "/projects"
app = FastAPI(title="Todo List API", version="1.0.0", redirect_slashes=False)
register_error_handlers(app)

protected = [Depends(require_bearer_token)]

app.include_router(auth_router.router, tags=["Auth"])
app.include_router(project_router.router, prefix="/projects", tags=["Projects"], dependencies=protected)
app.include_router(todo_router.project_todos_router, prefix="/projects", tags=["Todos"], dependencies=protected)
app.include_router(todo_router.router, prefix="/todos", tags=["Todos"], dependencies=protected)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
