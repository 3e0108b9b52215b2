#app/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

DEFAULT_JOB_ROLE = "Software Development"

# --- One company parsed from a markdown list item ---
class Company(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    website: str  # URL or "#" when the line carried no link

# --- Citation attached to a grounded answer ---
class GroundingSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    uri: str

# --- Device position captured by the browser ---
class Coordinates(BaseModel):
    latitude: float
    longitude: float

# --- Result of one search call ---
class SearchResult(BaseModel):
    companies: List[Company] = Field(default_factory=list)
    sources: List[GroundingSource] = Field(default_factory=list)

# --- Everything the page needs to render ---
class ViewState(BaseModel):
    status: Literal["idle", "validating", "loading", "success", "failure"] = "idle"
    location: str = ""
    job_role: str = DEFAULT_JOB_ROLE
    message: Optional[str] = None
    message_kind: Optional[Literal["error", "info"]] = None
    companies: List[Company] = Field(default_factory=list)
    sources: List[GroundingSource] = Field(default_factory=list)
    history: List[str] = Field(default_factory=list)
    # set after a current-location search so follow-up searches keep the bias
    coords: Optional[Coordinates] = None

# --- Request schema for /api/search ---
class SearchRequest(BaseModel):
    location: str = ""
    job_role: str = ""
    coords: Optional[Coordinates] = None

# --- Request schema for /api/search/current-location ---
class CurrentLocationRequest(BaseModel):
    job_role: str = ""
    coords: Optional[Coordinates] = None
    geolocation_error: Optional[str] = None
