from types import SimpleNamespace

import pytest

from app.history import SearchHistory
from app.storage import SessionStorage


class FakeModels:
    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error:
            raise self.error
        return self.response


class FakeGeminiClient:
    def __init__(self, response=None, error: Exception | None = None):
        self.models = FakeModels(response, error)
        self.aio = SimpleNamespace(models=self.models)


def make_chunk(web: dict | None = None, maps: dict | None = None):
    return SimpleNamespace(
        web=SimpleNamespace(**web) if web is not None else None,
        maps=SimpleNamespace(**maps) if maps is not None else None,
    )


def make_response(text: str | None, chunks: list | None = None):
    metadata = SimpleNamespace(grounding_chunks=chunks)
    return SimpleNamespace(text=text, candidates=[SimpleNamespace(grounding_metadata=metadata)])


ANSWER = """Here are some companies near Austin:

- **Acme Corp**: Great place. [Apply](https://acme.example/careers)
- **Globex**: Builds developer tools. [Website](https://globex.example)
"""


@pytest.fixture
def session() -> dict:
    return {}


@pytest.fixture
def history(session) -> SearchHistory:
    return SearchHistory(SessionStorage(session))


@pytest.fixture
def gemini_response():
    return make_response(
        ANSWER,
        [
            make_chunk(web={"title": "Acme careers", "uri": "https://acme.example/careers"}),
            make_chunk(maps={"title": "Globex HQ", "uri": "https://maps.example/globex"}),
        ],
    )
