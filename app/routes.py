# app/routes.py
import uuid
from pathlib import Path
from typing import Any, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from .config import HISTORY_BACKEND
from .controller import SearchController
from .history import CURRENT_LOCATION, SearchHistory
from .schemas import Coordinates, CurrentLocationRequest, SearchRequest, ViewState
from .storage import KeyValueStorage, SessionStorage

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


# ----------------------
# Dependencies
# ----------------------

def get_storage(request: Request) -> KeyValueStorage:
    if HISTORY_BACKEND == "mongo":
        from .mongo import MongoStorage

        visitor_uuid = request.session.get("visitor_uuid")
        if not visitor_uuid:
            visitor_uuid = str(uuid.uuid4())
            request.session["visitor_uuid"] = visitor_uuid
        return MongoStorage(visitor_uuid)
    return SessionStorage(request.session)


def get_search_client() -> Optional[Any]:
    # None lets the search service build the shared Gemini client lazily
    return None


def get_controller(
    storage: KeyValueStorage = Depends(get_storage),
    client: Optional[Any] = Depends(get_search_client),
) -> SearchController:
    return SearchController(SearchHistory(storage), client=client)


def coords_from_form(latitude: Optional[float], longitude: Optional[float]) -> Optional[Coordinates]:
    if latitude is None or longitude is None:
        return None
    return Coordinates(latitude=latitude, longitude=longitude)


def render(request: Request, state: ViewState) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"state": state, "current_location": CURRENT_LOCATION},
    )


# ----------------------
# HTML pages
# ----------------------

@router.get("/", response_class=HTMLResponse)
async def index(request: Request, controller: SearchController = Depends(get_controller)):
    return render(request, controller.initial_state())


@router.post("/search", response_class=HTMLResponse)
async def search(
    request: Request,
    location: str = Form(""),
    job_role: str = Form(""),
    latitude: Optional[float] = Form(None),
    longitude: Optional[float] = Form(None),
    controller: SearchController = Depends(get_controller),
):
    state = await controller.search(location, job_role, coords_from_form(latitude, longitude))
    return render(request, state)


@router.post("/search/current-location", response_class=HTMLResponse)
async def search_current_location(
    request: Request,
    job_role: str = Form(""),
    latitude: Optional[float] = Form(None),
    longitude: Optional[float] = Form(None),
    geolocation_error: Optional[str] = Form(None),
    controller: SearchController = Depends(get_controller),
):
    coords = coords_from_form(latitude, longitude)
    state = await controller.search_current_location(job_role, coords, geolocation_error)
    return render(request, state)


@router.post("/history/clear")
async def clear_history(controller: SearchController = Depends(get_controller)):
    controller.clear_history()
    return RedirectResponse(url="/", status_code=303)


# ----------------------
# JSON API
# ----------------------

@router.get("/api/history", response_model=ViewState)
async def api_history(controller: SearchController = Depends(get_controller)):
    return controller.initial_state()


@router.post("/api/search", response_model=ViewState)
async def api_search(body: SearchRequest, controller: SearchController = Depends(get_controller)):
    return await controller.search(body.location, body.job_role, body.coords)


@router.post("/api/search/current-location", response_model=ViewState)
async def api_search_current_location(
    body: CurrentLocationRequest,
    controller: SearchController = Depends(get_controller),
):
    return await controller.search_current_location(body.job_role, body.coords, body.geolocation_error)


@router.delete("/api/history", response_model=ViewState)
async def api_clear_history(controller: SearchController = Depends(get_controller)):
    return controller.clear_history()
