# daizy/api/client.py
# Created: 2026-10-19 10:12:41
# Author: Daizy

from typing import Any, Callable, Dict, List, Optional, Type, TypeVar
from dataclasses import dataclass, field, replace
from enum import Enum
import asyncio
import logging
import json
from urllib.parse import quote
import aiohttp
import yarl

from ..core.config import Config, DEFAULT_BASE_URL, DEFAULT_BASE_PATH, DEFAULT_TIMEOUT
from ..core.utils import require_string, validate_base_url, validate_timeout
from .errors import RequestError, DecodeError, ResponseError
from .models import Project, ProjectListResponse, CreateProjectRequest, UpdateProjectRequest

T = TypeVar('T')
logger = logging.getLogger(__name__)

USER_AGENT = "daizy-python/0.1.0"

class RequestMethod(Enum):
    """HTTP request methods"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

@dataclass(frozen=True)
class ClientConfig:
    """Configuration for API client"""
    organisation: str
    token: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    base_path: str = DEFAULT_BASE_PATH
    timeout: float = DEFAULT_TIMEOUT  # seconds

Option = Callable[[ClientConfig], ClientConfig]

def with_base_url(host: str) -> Option:
    """Override the service host, e.g. ``https://api.daizy.io``"""
    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, base_url=host)
    return apply

def with_base_path(path: str) -> Option:
    """Override the API path prefix. An empty string selects no prefix."""
    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, base_path=path)
    return apply

def with_timeout(seconds: float) -> Option:
    """Override the default request timeout"""
    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, timeout=seconds)
    return apply

class APIClient:
    """
    Client for the Daizy organisation/project API.

    Every call is a single authenticated request; there is no retrying,
    caching or rate limiting. Non-200 responses raise ResponseError.
    """

    def __init__(
        self,
        organisation: str,
        token: str,
        *options: Option,
        session: Optional[aiohttp.ClientSession] = None
    ):
        require_string(organisation, "organisation ID is required")
        require_string(token, "authorization token is required")

        config = ClientConfig(organisation=organisation, token=token)
        for option in options:
            config = option(config)

        validate_base_url(config.base_url)
        validate_timeout(config.timeout)

        self.config = config
        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_config(cls, config: Config, *options: Option, **kwargs: Any) -> "APIClient":
        """Build a client from ``api.*`` settings; explicit options win."""
        organisation = config.get("api.organisation")
        token = config.get("api.token")
        defaults: List[Option] = [
            with_base_url(config.get("api.base_url", DEFAULT_BASE_URL)),
            with_base_path(config.get("api.base_path", DEFAULT_BASE_PATH)),
            with_timeout(config.get("api.timeout", DEFAULT_TIMEOUT))
        ]
        return cls(
            "" if organisation is None else str(organisation),
            "" if token is None else str(token),
            *defaults,
            *options,
            **kwargs
        )

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session"""
        if self._session is not None and not self._owns_session and self._session.closed:
            logger.error("Injected client session is closed")
            raise RequestError("HTTP request failed: client session is closed")
        if self._session is None or (self._owns_session and self._session.closed):
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": USER_AGENT}
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the session if this client created it"""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    def _url(self, path: str) -> yarl.URL:
        return yarl.URL(f"{self.config.base_url}{self.config.base_path}{path}", encoded=True)

    def _organisation_path(self, suffix: str) -> str:
        return f"/organisation/{quote(self.config.organisation, safe='')}{suffix}"

    async def request(
        self,
        method: RequestMethod,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None
    ) -> bytes:
        """
        Make an API request and return the raw body of a 200 response

        Args:
            method: HTTP method to use
            path: Path appended to the configured host and path prefix
            data: Request body, sent as JSON
            timeout: Per-call timeout in seconds, overriding the configured one

        Raises:
            RequestError: if the request could not be completed
            ResponseError: if the service answered with a non-200 status
            DecodeError: if a non-200 body is not a valid error response
        """
        url = self._url(path)
        headers = {
            "Authorization": f"Bearer {self.config.token}",
            "Content-Type": "application/json"
        }
        body = None if data is None else json.dumps(data, separators=(",", ":")).encode("utf-8")
        request_timeout = aiohttp.ClientTimeout(
            total=self.config.timeout if timeout is None else validate_timeout(timeout)
        )

        session = await self._get_session()
        logger.debug(f"{method.value} {url}")

        try:
            async with session.request(
                method.value,
                url,
                data=body,
                headers=headers,
                timeout=request_timeout
            ) as response:
                status = response.status
                payload = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"{method.value} {url} failed: {e!r}")
            raise RequestError(f"HTTP request failed: {e!r}", details={"cause": e}) from e

        if status != 200:
            try:
                error = ResponseError.from_payload(json.loads(payload), status)
            except ValueError as e:
                logger.warning(f"{method.value} {url} returned {status} with an undecodable body")
                raise DecodeError(
                    f"unable to decode error response from server: {str(e)}",
                    details={"status": status, "cause": e}
                ) from e
            logger.warning(f"{method.value} {url} returned {status}: {error.message}")
            raise error

        return payload

    async def request_json(
        self,
        method: RequestMethod,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        model: Optional[Type[T]] = None,
        timeout: Optional[float] = None
    ) -> Any:
        """
        Make an API request and decode the JSON body, optionally into ``model``

        ``model`` must provide a ``from_dict`` classmethod.
        """
        payload = await self.request(method, path, data=data, timeout=timeout)
        try:
            decoded = json.loads(payload)
        except ValueError as e:
            raise DecodeError(f"unable to decode response body: {str(e)}", details={"cause": e}) from e

        if model is None:
            return decoded
        if not isinstance(decoded, dict):
            raise DecodeError(f"expected a JSON object for {model.__name__}, got {type(decoded).__name__}")
        try:
            return model.from_dict(decoded)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"unable to decode {model.__name__}: {str(e)}", details={"cause": e}) from e

    async def get_projects(self) -> List[Project]:
        """Return all projects of the organisation"""
        response = await self.request_json(
            RequestMethod.GET, self._organisation_path("/projects"), model=ProjectListResponse
        )
        return response.projects

    async def get_project(self, project_id: int) -> Project:
        """Return a single project"""
        return await self.request_json(
            RequestMethod.GET, self._organisation_path(f"/project/{project_id}"), model=Project
        )

    async def create_project(self, project: CreateProjectRequest) -> Project:
        """Create a project and return it as stored by the service"""
        return await self.request_json(
            RequestMethod.POST, self._organisation_path("/project"), data=project.to_dict(), model=Project
        )

    async def update_project(self, project_id: int, project: UpdateProjectRequest) -> Project:
        """Update a project and return it as stored by the service"""
        return await self.request_json(
            RequestMethod.PUT,
            self._organisation_path(f"/project/{project_id}"),
            data=project.to_dict(),
            model=Project
        )

    async def delete_project(self, project_id: int) -> None:
        """Delete a project"""
        await self.request(RequestMethod.DELETE, self._organisation_path(f"/project/{project_id}"))
