from pathlib import Path
import logging

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware
from fastapi.staticfiles import StaticFiles

from app.config import FASTAPI_SECRET_KEY, LOG_FILE, LOG_LEVEL
from app.routes import router as search_router

BASE_DIR = Path(__file__).resolve().parent

# ------------------ Logging ------------------
logging.basicConfig(
    filename=LOG_FILE,
    level=LOG_LEVEL,
    format='%(asctime)s [%(levelname)s] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)


def create_app() -> FastAPI:
    app = FastAPI(title="Nearby Opportunity Hub")

    # Session cookie carries the search history (or the visitor id for the mongo backend)
    app.add_middleware(SessionMiddleware, secret_key=FASTAPI_SECRET_KEY)

    # Mount static files (CSS, JS)
    app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")

    app.include_router(search_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="127.0.0.1", port=8000)
