# app/gemini.py
import logging
from functools import lru_cache
from typing import Any, List, Optional

from google import genai
from google.genai import types

from .config import GEMINI_API_KEY, GEMINI_MODEL
from .parser import PLACEHOLDER_URL, parse_company_markdown
from .schemas import Coordinates, GroundingSource, SearchResult

logger = logging.getLogger(__name__)

SEARCH_FAILED_MESSAGE = "Failed to fetch company data. Please try again."


class CompanySearchError(Exception):
    """Raised for any failure of the search call. Carries only the generic message."""

    def __init__(self, message: str = SEARCH_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message


@lru_cache(maxsize=1)
def get_client() -> genai.Client:
    return genai.Client(api_key=GEMINI_API_KEY)


# ----------------------
# Request construction
# ----------------------

def build_prompt(location: str, job_role: str) -> str:
    return (
        f"Find {job_role} companies and opportunities near {location}. "
        "For each company, provide its name, a brief description, and a direct link "
        "to its website or careers page. "
        "Format each company as a markdown list item with the name in bold."
    )


def build_search_config(coords: Optional[Coordinates] = None) -> types.GenerateContentConfig:
    """
    Enables Google Search and Google Maps grounding. When coords are given the
    retrieval is biased toward that position.
    """
    tool_config = None
    if coords is not None:
        tool_config = types.ToolConfig(
            retrieval_config=types.RetrievalConfig(
                lat_lng=types.LatLng(latitude=coords.latitude, longitude=coords.longitude)
            )
        )
    return types.GenerateContentConfig(
        tools=[
            types.Tool(google_search=types.GoogleSearch()),
            types.Tool(google_maps=types.GoogleMaps()),
        ],
        tool_config=tool_config,
    )


# ----------------------
# Response parsing
# ----------------------

def extract_sources(response: Any) -> List[GroundingSource]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    sources = []
    for chunk in chunks:
        source_data = getattr(chunk, "web", None) or getattr(chunk, "maps", None)
        source = GroundingSource(
            title=getattr(source_data, "title", None) or "Source",
            uri=getattr(source_data, "uri", None) or PLACEHOLDER_URL,
        )
        if source.uri != PLACEHOLDER_URL:
            sources.append(source)
    return sources


# ----------------------
# Main Logic
# ----------------------

async def find_companies(
    location: str,
    job_role: str,
    coords: Optional[Coordinates] = None,
    client: Optional[Any] = None,
) -> SearchResult:
    try:
        if client is None:
            client = get_client()
        response = await client.aio.models.generate_content(
            model=GEMINI_MODEL,
            contents=build_prompt(location, job_role),
            config=build_search_config(coords),
        )
        companies = parse_company_markdown(response.text)
        sources = extract_sources(response)
    except Exception as e:
        logger.error(f"Error calling Gemini API | location: '{location}' | role: '{job_role}' | {e!r}")
        raise CompanySearchError() from e

    logger.info(f"Gemini search '{job_role}' near '{location}': {len(companies)} companies, {len(sources)} sources")
    return SearchResult(companies=companies, sources=sources)
