"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Generator
from dataclasses import dataclass, field
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from dictlookup.dependencies import get_dictionary_service
from dictlookup.main import app
from dictlookup.services.dictionary import (
    CacheManager,
    Definition,
    DictionaryService,
    Example,
    LookupResult,
    Pronunciation,
    VerbForm,
)

SITE_URL = "https://dictionary.cambridge.org"
WIKI_SITE_URL = "https://simple.wiktionary.org"
CAMBRIDGE_URL = f"{SITE_URL}/us/dictionary/english/class"
WIKI_URL = f"{WIKI_SITE_URL}/wiki/class"

CAMBRIDGE_HTML = """
<html><body>
<div class="pr dictionary" data-id="cald4">
  <div class="pr entry-body__el">
    <div class="pos-header dpos-h">
      <div class="di-title"><span class="hw dhw">class</span></div>
      <div class="posgram dpos-g"><span class="pos dpos">noun</span></div>
      <span class="uk dpron-i">
        <span class="region dreg">uk</span>
        <span class="daud"><audio><source type="audio/mpeg"
          src="/media/english/uk_pron/u/ukc/ukcla/ukclasp002.mp3"/></audio></span>
        <span class="pron dpron">/klɑːs/</span>
      </span>
      <span class="us dpron-i">
        <span class="region dreg">us</span>
        <span class="daud"><audio><source type="audio/mpeg"
          src="/media/english/us_pron/c/cla/class/class.mp3"/></audio></span>
        <span class="pron dpron">/klæs/</span>
      </span>
      <span class="us dpron-i">
        <span class="region dreg">us</span>
        <span class="pron dpron">/klæs/</span>
      </span>
    </div>
    <div class="pos-body">
      <div class="def-block ddef_block">
        <div class="ddef_h"><div class="def ddef_d db">a group of students who are taught together</div></div>
        <div class="def-body ddef_b">
          <span class="trans dtrans">班</span>
          <div class="examp dexamp">
            <span class="eg deg">We were in the same class at school.</span>
            <span class="trans dtrans">我們在學校是同班同學。</span>
          </div>
          <div class="examp dexamp"><span class="eg deg">She's in my class.</span></div>
        </div>
      </div>
    </div>
  </div>
  <div class="pr entry-body__el">
    <div class="pos-header dpos-h">
      <div class="posgram dpos-g"><span class="pos dpos">verb</span></div>
      <span class="us dpron-i">
        <span class="region dreg">us</span>
        <span class="daud"><audio><source src="/media/english/us_pron/c/cla/class/class.mp3"/></audio></span>
        <span class="pron dpron">/klæs/</span>
      </span>
    </div>
    <div class="def-block ddef_block">
      <div class="def ddef_d db">to put someone or something in a particular group</div>
      <div class="def-body ddef_b"></div>
    </div>
  </div>
  <div class="pr entry-body__el">
    <div class="pos-header dpos-h">
      <div class="posgram dpos-g"><span class="pos dpos">adjective</span></div>
    </div>
    <div class="def-block ddef_block">
      <div class="def ddef_d db">very good or stylish</div>
    </div>
  </div>
</div>
</body></html>
"""

NOT_FOUND_HTML = """
<html><body><div class="search-results">Search results for "qwxz"</div></body></html>
"""

WIKTIONARY_HTML = """
<html><body>
<table class="inflection-table">
  <tr>
    <td><p>simple present
class</p></td>
    <td><p>past tense<br>classed</p></td>
  </tr>
  <tr>
    <td><p><b>past participle</b><br><a href="/wiki/classed">classed</a></p></td>
    <td><p>present participle<br/>classing</p></td>
  </tr>
  <tr>
    <td>   </td>
    <td>no paragraph</td>
    <td><p>only one part</p></td>
    <td><p>third person<br></p></td>
  </tr>
</table>
</body></html>
"""


def make_response(url: str, status_code: int = 200, text: str = "") -> httpx.Response:
    """Build a real httpx response bound to a GET request."""
    return httpx.Response(status_code, text=text, request=httpx.Request("GET", url))


@dataclass
class MockHttp:
    """Canned upstream responses keyed by URL."""

    routes: dict[str, Any] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    client: MagicMock | None = None


@pytest.fixture
def mock_http() -> Generator[MockHttp, None, None]:
    """Patch httpx.AsyncClient; unknown URLs answer 404, exceptions are raised."""
    state = MockHttp()

    async def fake_get(url: str, *args: Any, **kwargs: Any) -> httpx.Response:
        state.calls.append(url)
        outcome = state.routes.get(url)
        if outcome is None:
            return make_response(url, 404)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    with patch("httpx.AsyncClient") as mock_client:
        mock_instance = AsyncMock()
        mock_instance.__aenter__.return_value = mock_instance
        mock_instance.__aexit__.return_value = None
        mock_instance.get.side_effect = fake_get
        mock_client.return_value = mock_instance
        state.client = mock_client
        yield state


@pytest.fixture
def cache_manager() -> CacheManager:
    return CacheManager(ttl_seconds=60, max_size=100)


@pytest.fixture
def service(cache_manager: CacheManager) -> DictionaryService:
    return DictionaryService(
        cache_manager=cache_manager,
        cambridge_base_url=SITE_URL,
        wiktionary_base_url=WIKI_SITE_URL,
        timeout=5.0,
        user_agent="test-agent",
    )


@pytest.fixture
def sample_result() -> LookupResult:
    """A normalized lookup result."""
    return LookupResult(
        word="class",
        parts_of_speech=["noun", "verb"],
        verbs=[VerbForm(id=0, form_type="simple present", text="class")],
        pronunciations=[
            Pronunciation(
                part_of_speech="noun",
                region="us",
                audio_url=f"{SITE_URL}/media/english/us_pron/c/cla/class/class.mp3",
                phonetic="/klæs/",
            )
        ],
        definitions=[
            Definition(
                id=0,
                part_of_speech="noun",
                source="cald4",
                text="a group of students who are taught together",
                examples=[Example(id=0, text="We were in the same class at school.")],
            )
        ],
    )


@pytest.fixture
def fake_service(sample_result: LookupResult) -> MagicMock:
    """Service stand-in whose lookup returns ``sample_result``."""
    fake = MagicMock(spec=DictionaryService)
    fake.lookup = AsyncMock(return_value=sample_result)
    return fake


@pytest.fixture
def test_app(fake_service: MagicMock) -> Generator[FastAPI, None, None]:
    """FastAPI application using the fake service."""
    app.dependency_overrides[get_dictionary_service] = lambda: fake_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app: FastAPI) -> TestClient:
    """Create a synchronous test client."""
    return TestClient(test_app)


@pytest.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an asynchronous test client."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client
