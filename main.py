# main.py
import logging
import routes
from contextlib import asynccontextmanager
from util.enums import Environment, Color, ErrorMessage
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware
from config.settings import settings
from util.constants import PROVIDER_PRIORITY
from model.api import ErrorResponse
from util.errors import AppError
from util.log import configure_logging

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def _print_available_models() -> None:
    print(f"{Color.BOLD}Available Models:{Color.RESET}")
    for name, available in settings.available_models().items():
        mark = f"{Color.GREEN}✔" if available else f"{Color.RED}✖"
        print(f"  {name:<11} {mark}{Color.RESET}")
    print(f"{Color.CYAN}Fallback order: {' → '.join(p.value for p in PROVIDER_PRIORITY)}{Color.RESET}")


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    print(f"{Color.GREEN}Multi-AI Verify Server Started{Color.RESET}")
    _print_available_models()

    if not any(settings.available_models().values()):
        print(
            f"{Color.YELLOW}No provider keys configured; "
            f"every request will use the local fallback{Color.RESET}"
        )

    try:
        yield
    finally:
        print(f"{Color.RED}Server Shutdown{Color.RESET}")


app: FastAPI = FastAPI(title="Multi-AI Verify", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_credentials=True,  # Allow cookies and other credentials
    allow_methods=["GET", "POST"],  # Allowed HTTP Methods
    allow_headers=["Authorization", "Content-Type", "Accept"],  # Allowed HTTP Headers
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=ErrorResponse(error=exc.message).model_dump(exclude_none=True),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error=ErrorMessage.INTERNAL_ERROR.value.message,
            message="Verification failed unexpectedly",
        ).model_dump(),
    )


routes.register_routes(app)

if __name__ == "__main__":
    import uvicorn

    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=reload)
