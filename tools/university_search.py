from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import httpx
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator


logger = logging.getLogger(__name__)

API_URL = "http://universities.hipolabs.com/search"
MAX_DISPLAYED = 10

TOOL_NAME = "search_universities"
TOOL_DESCRIPTION = (
    "Search for universities by country name. Returns a list of universities"
    " with their details including name, country, domains, and web pages."
)


class UniversityLookupError(Exception):
    pass


class TransportError(UniversityLookupError):
    """The request never produced a response (DNS, refused connection, timeout)."""


class RemoteError(UniversityLookupError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"Failed to fetch universities data: {status_code}")
        self.status_code = status_code


class DecodeError(UniversityLookupError):
    """The response body is not a JSON list of university objects."""


class University(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    alpha_two_code: str
    country: str
    domains: Tuple[str, ...] = ()
    name: str
    # the live API spells this key "state-province"
    state_province: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("state_province", "state-province"),
    )
    web_pages: Tuple[str, ...] = ()

    @field_validator("state_province")
    @classmethod
    def _blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @property
    def website(self) -> Optional[str]:
        """First web page, or None only when there are no web pages."""
        return self.web_pages[0] if self.web_pages else None


_UNIVERSITY_LIST = TypeAdapter(List[University])


class UniversityLookup:
    """Query the public universities directory by country name.

    Every call is a fresh request: no retries, no caching. When no client is
    injected a throwaway ``httpx.Client`` without a timeout is used for the
    single request; pass a client to bound latency or to stub the transport.
    """

    def __init__(self, client: Optional[httpx.Client] = None, base_url: str = API_URL) -> None:
        self._client = client
        self.base_url = base_url

    def search(self, country: str) -> List[University]:
        country = (country or "").strip()
        if not country:
            raise ValueError("country name must not be empty")

        logger.debug("GET %s country=%r", self.base_url, country)
        if self._client is not None:
            response = self._get(self._client, country)
        else:
            with httpx.Client(timeout=None, follow_redirects=True) as client:
                response = self._get(client, country)

        if not response.is_success:
            logger.warning("universities API returned %s for %r", response.status_code, country)
            raise RemoteError(response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            # JSONDecodeError or UnicodeDecodeError
            raise DecodeError(
                f"Malformed universities data: response is not JSON ({type(e).__name__}: {e})"
            ) from e
        try:
            universities = _UNIVERSITY_LIST.validate_python(payload)
        except ValidationError as e:
            raise DecodeError(
                f"Malformed universities data: {e.error_count()} validation error(s)"
            ) from e
        logger.debug("universities API returned %d record(s) for %r", len(universities), country)
        return universities

    def _get(self, client: httpx.Client, country: str) -> httpx.Response:
        try:
            return client.get(self.base_url, params={"country": country})
        except (httpx.TransportError, httpx.TooManyRedirects) as e:
            logger.warning("universities API unreachable: %s: %s", type(e).__name__, e)
            raise TransportError(
                f"Failed to reach universities API: {type(e).__name__}: {e}"
            ) from e
        except httpx.DecodingError as e:
            raise DecodeError(
                f"Malformed universities data: undecodable response body ({e})"
            ) from e


def _format_entry(index: int, uni: University) -> str:
    return (
        f"{index}. {uni.name}\n"
        f"   Country: {uni.country}\n"
        f"   State/Province: {uni.state_province if uni.state_province is not None else 'N/A'}\n"
        f"   Website: {uni.website if uni.website is not None else 'N/A'}\n"
        f"   Domains: {', '.join(uni.domains)}"
    )


def format_results(query: str, universities: List[University]) -> str:
    if not universities:
        return f"No universities found for country: {query}"

    total = len(universities)
    shown = min(MAX_DISPLAYED, total)
    entries = "\n\n".join(
        _format_entry(i, uni) for i, uni in enumerate(universities[:MAX_DISPLAYED], 1)
    )
    text = f"Found {total} universities in {query}. Showing top {shown}:\n\n{entries}"
    if total > MAX_DISPLAYED:
        text += f"\n\n... and {total - MAX_DISPLAYED} more universities."
    return text


def run(query: str, lookup: Optional[UniversityLookup] = None) -> str:
    """Look up universities for a country and return a readable summary.

    Designed for use as a LangChain Tool: always returns text, failures
    included, so the agent loop can observe them.
    """
    lookup = lookup or UniversityLookup()
    try:
        universities = lookup.search(query)
    except (UniversityLookupError, ValueError) as e:
        return f"Error searching universities: {e}"
    except Exception as e:
        logger.exception("unexpected failure searching universities for %r", query)
        return f"Error searching universities: {type(e).__name__}: {e}"
    return format_results(query, universities)


if __name__ == "__main__":
    import sys
    q = " ".join(sys.argv[1:]) if len(sys.argv) > 1 else "Canada"
    print(run(q))
