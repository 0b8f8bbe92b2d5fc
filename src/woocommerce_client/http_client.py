"""
HTTP client for the WooCommerce REST API with authentication, strict response
decoding and rate-limit aware retry logic
"""

import json
import logging
import posixpath
import re
import time
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import to_json
from requests.auth import HTTPBasicAuth
from requests.structures import CaseInsensitiveDict

from .errors import ResponseDecodingError, ResponseError, RateLimitError, check_response_error
from .query import encode_options
from .services import (
    CouponService,
    CustomerService,
    FileService,
    OrderService,
    ProductService,
    SubscriptionNoteService,
    SubscriptionOrderService,
    SubscriptionService,
)

if TYPE_CHECKING:
    from .config_loader import ClientConfig

USER_AGENT = "woocommerce/1.0.0"
DEFAULT_HTTP_TIMEOUT = 60
DEFAULT_VERSION = "v1"

API_VERSION_PATTERN = re.compile(r"^v[0-9]+$")


@dataclass(frozen=True)
class App:
    """
    Credentials for a WooCommerce store

    Either a consumer key/secret pair (HTTP basic auth) or a JWT token. When
    a token is set it takes precedence.
    """
    consumer_key: str = ""
    consumer_secret: str = ""
    jwt_token: str = ""
    app_name: str = ""

    def new_client(self, shop_name: str, **options: Any) -> "Client":
        """Equivalent to Client(app, shop_name, **options)"""
        return Client(self, shop_name, **options)


def shop_base_url(shop_name: str) -> str:
    """Return a shop's https base URL, e.g. shop_base_url("shop.example.com")"""
    return f"https://{shop_name}"


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class Client:
    """WooCommerce API client bound to one store"""

    def __init__(
        self,
        app: App,
        shop_name: str,
        *,
        version: str = DEFAULT_VERSION,
        path_prefix: Optional[str] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        retries: int = 0,
        logger: Optional[logging.Logger] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialise the client

        Args:
            app: Store credentials
            shop_name: Store URL (e.g. "https://shop.example.com") or bare domain
            version: API version tag, e.g. "v3"
            path_prefix: REST path prefix, defaults to /wp-json/wc/<version>
            timeout: Overall HTTP timeout in seconds
            retries: Retry budget for rate limited and unavailable responses,
                0 disables retries
            logger: Logger receiving request/response traces
            session: HTTP session to send requests with

        Raises:
            ValueError: If the version tag or retry budget is invalid
        """
        if not API_VERSION_PATTERN.match(version):
            raise ValueError(f"Invalid API version: {version}")
        if retries < 0:
            raise ValueError(f"Retry budget must be non-negative, got {retries}")

        if not urlsplit(shop_name).scheme:
            shop_name = shop_base_url(shop_name)

        self.app = app
        self.base_url = shop_name
        self.version = version
        self.path_prefix = path_prefix or f"/wp-json/wc/{version}"
        self.timeout = timeout
        self.retries = retries
        self.log = logger or logging.getLogger(__name__)
        self.session = session or requests.Session()

        self.coupon = CouponService(self)
        self.customer = CustomerService(self)
        self.order = OrderService(self)
        self.product = ProductService(self)
        self.subscription = SubscriptionService(self)
        self.subscription_note = SubscriptionNoteService(self)
        self.subscription_order = SubscriptionOrderService(self)
        self.file = FileService(self)

    @classmethod
    def from_config(cls, config: "ClientConfig", session: Optional[requests.Session] = None) -> "Client":
        """
        Build a client from a loaded configuration

        Args:
            config: ClientConfig from ConfigLoader.load_config
            session: Optional HTTP session

        Returns:
            Configured Client

        Raises:
            MissingEnvironmentError: If a credential environment variable is unset
        """
        from .config_loader import ConfigLoader

        return cls(
            ConfigLoader.resolve_app(config),
            config.base_url,
            version=config.version,
            path_prefix=config.path_prefix,
            timeout=config.timeout,
            retries=config.retries,
            session=session,
        )

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session and release its connections"""
        self.session.close()

    def new_request(self, method: str, rel_path: str, body: Any = None,
                    options: Any = None) -> requests.PreparedRequest:
        """
        Create an API request

        Args:
            method: HTTP method
            rel_path: Path resolved against the base URL, may carry a query
            body: Value JSON encoded as the request body
            options: Query options added to any query already on the path

        Returns:
            Prepared request carrying JSON and authentication headers
        """
        scheme, netloc, path, query, fragment = urlsplit(urljoin(self.base_url, rel_path))

        if options is not None:
            pairs = encode_options(options)
            pairs += parse_qsl(query, keep_blank_values=True)
            query = urlencode(pairs)
        url = urlunsplit((scheme, netloc, path, query, fragment))

        data = None
        if body is not None:
            if isinstance(body, BaseModel):
                data = body.model_dump_json(by_alias=True, exclude_none=True)
            else:
                data = to_json(body, by_alias=True, exclude_none=True)
            if isinstance(data, str):
                data = data.encode("utf-8")

        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        auth = None
        if self.app.jwt_token:
            headers["Authorization"] = f"Bearer {self.app.jwt_token}"
        else:
            auth = HTTPBasicAuth(self.app.consumer_key, self.app.consumer_secret)

        return requests.Request(method, url, data=data, headers=headers, auth=auth).prepare()

    def do(self, request: requests.PreparedRequest, result_type: Any = None) -> Any:
        """Send a prepared request and decode the response into result_type"""
        result, _ = self.do_get_headers(request, result_type)
        return result

    def do_get_headers(self, request: requests.PreparedRequest,
                       result_type: Any = None) -> Tuple[Any, CaseInsensitiveDict]:
        """
        Send a request, retrying on rate limits and 503s, and decode the result

        Args:
            request: Prepared request
            result_type: Type to strictly decode the body into, or None

        Returns:
            Tuple of (decoded result or None, response headers)

        Raises:
            requests.exceptions.RequestException: For transport failures
            ResponseDecodingError: If a body could not be decoded
            RateLimitError: If still rate limited once the retry budget is spent
            ResponseError: For any other non-2xx response
        """
        retries = self.retries
        attempts = 0
        self._log_request(request)

        while True:
            attempts += 1
            try:
                response = self.session.send(request, timeout=self.timeout)
            except requests.exceptions.RequestException as e:
                self.log.error(f"HTTP error on attempt {attempts}: {e}")
                raise

            self._log_response(response)
            try:
                check_response_error(response)
                break
            except (ResponseError, ResponseDecodingError) as e:
                self.log.error(f"API error on attempt {attempts}: {e}")

                if retries <= 1:
                    raise

                if isinstance(e, RateLimitError):
                    self.log.debug(f"Rate limited, waiting {e.retry_after}s")
                    time.sleep(e.retry_after)
                    retries -= 1
                    continue

                if response.status_code == 503:
                    self.log.debug("Service unavailable, retrying")
                    retries -= 1
                    continue

                raise

        result = None
        if result_type is not None:
            try:
                result = _adapter(result_type).validate_json(response.content)
            except ValidationError as e:
                raise ResponseDecodingError(
                    message=str(e), body=response.content, status=response.status_code
                ) from e

        return result, response.headers

    def create_and_do(self, method: str, rel_path: str, data: Any = None,
                      options: Any = None, result_type: Any = None) -> Any:
        """Perform a request against the API and return the decoded result"""
        result, _ = self.create_and_do_get_headers(method, rel_path, data, options, result_type)
        return result

    def create_and_do_get_headers(self, method: str, rel_path: str, data: Any = None,
                                  options: Any = None,
                                  result_type: Any = None) -> Tuple[Any, CaseInsensitiveDict]:
        """
        Build and execute a request, returning the decoded result and headers

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            rel_path: Resource path relative to the API prefix, e.g. "orders/12"
            data: Request body
            options: Query options
            result_type: Type to decode the response into

        Returns:
            Tuple of (decoded result, response headers)
        """
        rel_path = posixpath.join(self.path_prefix, rel_path.lstrip("/"))
        try:
            request = self.new_request(method, rel_path, data, options)
        except (TypeError, ValueError) as e:
            self.log.error(f"Error creating request: {e}")
            raise
        return self.do_get_headers(request, result_type)

    def get(self, path: str, result_type: Any = None, options: Any = None) -> Any:
        return self.create_and_do("GET", path, None, options, result_type)

    def post(self, path: str, data: Any, result_type: Any = None) -> Any:
        return self.create_and_do("POST", path, data, None, result_type)

    def put(self, path: str, data: Any, result_type: Any = None) -> Any:
        return self.create_and_do("PUT", path, data, None, result_type)

    def delete(self, path: str, options: Any = None, result_type: Any = None) -> Any:
        return self.create_and_do("DELETE", path, None, options, result_type)

    def _log_request(self, request: requests.PreparedRequest) -> None:
        self.log.debug(f"{request.method}: {request.url}")
        headers = {
            name: ("<redacted>" if name.lower() == "authorization" else value)
            for name, value in request.headers.items()
        }
        self.log.debug(f"{headers}")
        self._log_body(request.body, "SENT")

    def _log_response(self, response: requests.Response) -> None:
        self.log.debug(f"RECV {response.status_code}: {response.reason}")
        self.log.debug(f"{dict(response.headers)}")
        # Reading .content buffers the body, so it can still be decoded afterwards
        try:
            body = response.content
        except (requests.exceptions.RequestException, RuntimeError) as e:
            self.log.debug(f"RESP: unreadable body: {e}")
            return
        self._log_body(body, "RESP")

    def _log_body(self, body: Any, label: str) -> None:
        if not body:
            return
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        try:
            pretty = json.dumps(json.loads(body), indent=1, ensure_ascii=False)
        except ValueError:
            pretty = body
        self.log.debug(f"{label}: {pretty}")

