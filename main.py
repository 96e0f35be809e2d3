import os
from typing import Optional

from fastapi import Body, Depends, FastAPI, Path
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from auth import issue_token, require_user
from env_loader import env_int, load_env_from_dotenv
from todos import add_todo, delete_todo, read_todos
from users import check_credentials, create_user

app = FastAPI(title="Todo API")

load_env_from_dotenv(".env.local")
load_env_from_dotenv(".env")

_cors_origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins or ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"message": message}, status_code=status_code)


@app.exception_handler(StarletteHTTPException)
async def http_error(request, exc: StarletteHTTPException):
    response = _error(str(exc.detail), exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(RequestValidationError)
async def validation_error(request, exc: RequestValidationError):
    # invalid JSON or wrong field types
    return _error("Invalid request body", 400)


@app.post("/auth/signup")
async def signup(username: Optional[str] = Body(None), password: Optional[str] = Body(None)):
    """
    Register a new user and return a token for it.
    Accepts JSON body: { "username": "...", "password": "..." }
    """
    if not username or not password:
        return _error("username and password are required", 400)

    user = create_user(username, password)
    if user is None:
        return _error("username already exists", 409)

    return JSONResponse({"token": issue_token(user), "username": username}, status_code=201)


@app.post("/auth/login")
async def login(username: Optional[str] = Body(None), password: Optional[str] = Body(None)):
    if not username or not password:
        return _error("username and password are required", 400)

    user = check_credentials(username, password)
    if user is None:
        return _error("invalid credentials", 401)

    return JSONResponse({"token": issue_token(user), "username": username})


@app.get("/todos")
async def list_todos(user: dict = Depends(require_user)):
    return JSONResponse(read_todos())


@app.post("/todos")
async def create_todo(text: Optional[str] = Body(None, embed=True), user: dict = Depends(require_user)):
    """
    Create a new todo item.
    Accepts JSON body: { "text": "..." }
    """
    if not text:
        return _error("Todo text is required", 400)

    return JSONResponse(add_todo(text), status_code=201)


@app.delete("/todos/{todo_id}")
async def remove_todo(todo_id: str = Path(...), user: dict = Depends(require_user)):
    if not delete_todo(todo_id):
        return _error("Todo not found", 404)
    return Response(status_code=204)


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = env_int("PORT", 3000)
    print(f"Todo API server listening at http://localhost:{port}")
    uvicorn.run(app, host=host, port=port)
