"""crates.io API client.

Fetches the published versions of a crate from the registry's web API.
"""

import logging

import requests
from pydantic import ValidationError
from requests import Response
from semver import Version

from upstall import __version__
from upstall.core.resolver import FetchError
from upstall.models.registry import CrateResponse

logger = logging.getLogger(__name__)

CRATES_IO_API_URL = "https://crates.io/api/v1"

# crates.io rejects requests without an identifying User-Agent
USER_AGENT = f"cargo-upstall/{__version__}"


class RegistryError(FetchError):
    """Raised when the registry cannot be queried or returns bad data."""


class RegistryClient:
    """Client for a crates.io-compatible registry API.

    Example:
        >>> client = RegistryClient()
        >>> versions = client.fetch_versions("ripgrep")
    """

    def __init__(
        self,
        base_url: str = CRATES_IO_API_URL,
        *,
        timeout: float = 30.0,
        user_agent: str = USER_AGENT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root, e.g. 'https://crates.io/api/v1'.
            timeout: Request timeout in seconds.
            user_agent: User-Agent header sent with every request.
            session: Optional requests session to reuse.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._user_agent = user_agent
        self._session = session

    @property
    def base_url(self) -> str:
        """Return the API root URL."""
        return self._base_url

    def crate_url(self, name: str) -> str:
        """Return the API URL for a crate."""
        return f"{self._base_url}/crates/{name}"

    def _get(self, url: str) -> Response:
        headers = {"User-Agent": self._user_agent, "Accept": "application/json"}
        if self._session is not None:
            return self._session.get(url, headers=headers, timeout=self._timeout)
        return requests.get(url, headers=headers, timeout=self._timeout)

    def fetch_crate(self, name: str) -> CrateResponse:
        """Fetch a crate's metadata and version list.

        Args:
            name: Crate name.

        Returns:
            Validated CrateResponse.

        Raises:
            RegistryError: On transport failure, a non-200 status, or a
                response that doesn't match the expected shape.
        """
        url = self.crate_url(name)
        logger.debug("Fetching %s", url)

        try:
            response = self._get(url)
        except requests.RequestException as e:
            raise RegistryError(f"Failed to reach registry for {name}: {e}") from e

        if response.status_code == 404:
            raise RegistryError(f"Crate {name} not found on registry")
        if response.status_code != 200:
            raise RegistryError(
                f"Unexpected status code {response.status_code} fetching {name}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise RegistryError(f"Registry returned invalid JSON for {name}: {e}") from e

        try:
            return CrateResponse.model_validate(payload)
        except ValidationError as e:
            raise RegistryError(f"Unexpected registry response for {name}: {e}") from e

    def fetch_versions(self, name: str) -> list[Version]:
        """Fetch every non-yanked published version of a crate.

        Args:
            name: Crate name.

        Returns:
            Published versions in registry order.

        Raises:
            RegistryError: If the registry cannot be queried.
        """
        crate = self.fetch_crate(name)
        versions = crate.version_numbers()
        logger.debug("Registry lists %d versions for %s", len(versions), crate.crate.name)
        return versions
