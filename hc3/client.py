from typing import NamedTuple, Optional
import httpx
import logging

from hc3 import config

logger = logging.getLogger(__name__)

# Status reported when no HTTP response was received at all
TRANSPORT_ERROR_CODE = 5001

HEADERS = {
    "X-Fibaro-Version": "2",
    "Content-Type": "application/json; charset=utf-8",
    "Accept": "*/*",
}


class RawResponse(NamedTuple):
    status_code: int
    status_message: str
    body: str


class HC3Client:
    """Blocking HTTP access to a hub's REST API at http://<host>/api."""

    def __init__(self, host: str, user: str, password: str, http_client: Optional[httpx.Client] = None):
        self.base_url = f"http://{host}/api"
        self.auth = httpx.BasicAuth(user, password)
        self._owns_http = http_client is None
        self.http = http_client if http_client is not None else httpx.Client()

    @classmethod
    def from_env(cls, http_client: Optional[httpx.Client] = None) -> "HC3Client":
        return cls(config.HC3_HOST, config.HC3_USER, config.HC3_PASSWORD, http_client=http_client)

    def request(self, path: str) -> httpx.Request:
        return self.http.build_request("GET", self.base_url + path, headers=HEADERS)

    def get(self, path: str) -> RawResponse:
        request = self.request(path)
        logger.debug(f"GET {request.url}")
        try:
            response = self.http.send(request, auth=self.auth)
        except httpx.HTTPError as e:
            logger.warning(f"Request to {request.url} failed: {e}")
            return RawResponse(TRANSPORT_ERROR_CODE, str(e), "")

        if not response.content:
            return RawResponse(response.status_code, "No data", "")
        return RawResponse(response.status_code, response.reason_phrase, response.text)

    def close(self):
        if self._owns_http:
            self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
