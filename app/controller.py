# app/controller.py
import logging
from typing import Any, Optional

from .gemini import CompanySearchError, find_companies
from .history import CURRENT_LOCATION, SearchHistory, is_current_location
from .schemas import Coordinates, ViewState

logger = logging.getLogger(__name__)

MISSING_LOCATION = "Please enter a location."
MISSING_JOB_ROLE = "Please enter a job role or sector."
NO_RESULTS = "No companies found for this location and job role. Try being more specific or broader."
GEOLOCATION_UNSUPPORTED = "Geolocation is not supported by your browser."
GEOLOCATION_FAILED = "Unable to retrieve your location. Please enter it manually."


class SearchController:
    """
    Drives one search from form input to a renderable ViewState:
    idle -> validating -> loading -> success | failure.
    Every step returns a new state, nothing is mutated in place.
    """

    def __init__(self, history: SearchHistory, client: Optional[Any] = None):
        self.history = history
        self.client = client

    def initial_state(self, **fields) -> ViewState:
        return ViewState(history=self.history.load(), **fields)

    @staticmethod
    def fail(state: ViewState, message: str) -> ViewState:
        return state.model_copy(update={"status": "failure", "message": message, "message_kind": "error"})

    def validate(self, state: ViewState) -> ViewState:
        if not state.location.strip():
            return self.fail(state, MISSING_LOCATION)
        if not state.job_role.strip():
            return self.fail(state, MISSING_JOB_ROLE)
        return state

    async def search(self, location: str, job_role: str, coords: Optional[Coordinates] = None) -> ViewState:
        state = self.initial_state(status="validating", location=location, job_role=job_role, coords=coords)
        state = self.validate(state)
        if state.status == "failure":
            return state
        if is_current_location(location) and coords is None:
            return self.fail(state, GEOLOCATION_FAILED)

        state = state.model_copy(update={"status": "loading", "message": None, "message_kind": None})
        try:
            result = await find_companies(location, job_role, coords, client=self.client)
        except CompanySearchError as e:
            return self.fail(state, e.message)

        history = self.history.record(location)
        update = {
            "status": "success",
            "companies": result.companies,
            "sources": result.sources,
            "history": history,
        }
        if not result.companies:
            update.update(message=NO_RESULTS, message_kind="info")
        return state.model_copy(update=update)

    async def search_current_location(
        self,
        job_role: str,
        coords: Optional[Coordinates] = None,
        geolocation_error: Optional[str] = None,
    ) -> ViewState:
        if geolocation_error == "unsupported":
            return self.fail(self.initial_state(job_role=job_role), GEOLOCATION_UNSUPPORTED)
        if geolocation_error or coords is None:
            logger.info(f"Geolocation unavailable: {geolocation_error or 'no coordinates'}")
            return self.fail(self.initial_state(job_role=job_role), GEOLOCATION_FAILED)
        return await self.search(CURRENT_LOCATION, job_role, coords)

    def clear_history(self) -> ViewState:
        self.history.clear()
        return self.initial_state()
