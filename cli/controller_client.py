"""HTTP client for communicating with Controller service."""

import time
import uuid
from typing import Optional

import httpx

from common.logging_config import get_logger
from common.utils import format_file_size, format_millis
from cli.config import ClientConfig
from cli.constants import GREEN, RESET

logger = get_logger(__name__)


class ControllerClient:
    """HTTP client for Controller API with retry logic and error handling."""

    def __init__(self, config: ClientConfig):
        """
        Initialize controller client.

        Args:
            config: Configuration instance
        """
        self.config = config
        self.session = httpx.Client(
            base_url=config.get_base_url(),
            timeout=config.get_timeout()
        )
        self.request_id = None
        logger.info(f"Initialized ControllerClient [base_url={config.get_base_url()}]")

    def _request_with_retry(
        self,
        method: str,
        endpoint: str,
        max_retries: Optional[int] = None,
        **kwargs
    ) -> httpx.Response:
        """
        Make HTTP request with retry logic on 5xx errors and network failures.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path
            max_retries: Max retry attempts (uses config default if None)
            **kwargs: Additional arguments to pass to httpx request

        Returns:
            HTTP response object

        Raises:
            ConnectionError: If max retries exceeded or connection fails
        """
        retry_config = self.config.get_retry_config()
        max_retries = max_retries if max_retries is not None else retry_config['max_retries']
        backoff = retry_config['retry_backoff_multiplier']

        last_exception = None

        self.request_id = str(uuid.uuid4())
        kwargs.setdefault('headers', {})['X-Request-ID'] = self.request_id

        logger.debug(
            f"Making request: {method} {endpoint} [request_id={self.request_id}]"
        )

        for attempt in range(max_retries + 1):
            try:
                response = self.session.request(method, endpoint, **kwargs)

                logger.debug(
                    f"Response received: {method} {endpoint} status={response.status_code} [request_id={self.request_id}]"
                )

                if 400 <= response.status_code < 500:
                    logger.warning(
                        f"Client error: {method} {endpoint} status={response.status_code} [request_id={self.request_id}]"
                    )
                    return response

                if response.status_code >= 500 and attempt < max_retries:
                    delay = backoff ** attempt
                    logger.warning(
                        f"Server error (attempt {attempt + 1}/{max_retries + 1}): "
                        f"{method} {endpoint} status={response.status_code}, retrying in {delay}s [request_id={self.request_id}]"
                    )
                    time.sleep(delay)
                    continue

                return response

            except (httpx.ConnectError, httpx.TimeoutException) as e:
                last_exception = e
                if attempt < max_retries:
                    delay = backoff ** attempt
                    logger.warning(
                        f"Network error (attempt {attempt + 1}/{max_retries + 1}): "
                        f"{method} {endpoint} error={type(e).__name__}, retrying in {delay}s [request_id={self.request_id}]"
                    )
                    time.sleep(delay)
                    continue
                logger.error(
                    f"Network error (max retries exceeded): {method} {endpoint} error={e} [request_id={self.request_id}]"
                )

        if isinstance(last_exception, httpx.TimeoutException):
            raise ConnectionError("Request timed out. Server may be overloaded.")
        raise ConnectionError("Cannot connect to controller server. Is it running?")

    def _format_error(self, response: httpx.Response) -> str:
        """
        Map HTTP errors to user-friendly messages.

        Args:
            response: HTTP response object

        Returns:
            User-friendly error message
        """
        try:
            error_data = response.json()
            detail = error_data.get('detail', 'Unknown error')
            code = error_data.get('code', 'UNKNOWN')
        except ValueError:
            detail = response.text if response.text else 'Unknown error'
            code = 'UNKNOWN'

        error_messages = {
            'MALFORMED_PATH': 'Malformed path.',
            'PATH_ALREADY_EXISTS': 'Path already exists.',
            'PATH_NOT_FOUND': 'No such file or directory.',
            'ANCESTOR_NOT_FOUND': 'Parent directory does not exist (use mkdir -p to create it).',
            'ANCESTOR_IS_FILE': 'A component of the path is a file, not a directory.',
            'STORE_UNAVAILABLE': 'Metadata store is currently unavailable. Please try again later.',
        }

        if code in error_messages:
            return f"{error_messages[code]} {detail}" if detail else error_messages[code]

        status_messages = {
            400: 'Bad request',
            404: 'Not found',
            409: 'Conflict',
            422: 'Invalid request',
            500: 'Server error',
            503: 'Service unavailable',
        }

        message = status_messages.get(response.status_code, detail)
        return f"{message} (Code: {code})" if code != 'UNKNOWN' else message

    def _call(self, method: str, endpoint: str, **kwargs):
        """
        Run a request and decode its JSON body.

        Returns:
            Tuple of (json_body, error_message); exactly one is None
        """
        try:
            response = self._request_with_retry(method, endpoint, **kwargs)
        except ConnectionError as e:
            return None, f"Error: {e}"

        if response.status_code >= 400:
            return None, f"Error: {self._format_error(response)}"
        return response.json(), None

    def create_file(self, path: str) -> str:
        data, error = self._call('POST', '/files', json={'path': path})
        if error:
            return error
        return f"{GREEN}Created file{RESET} {data['path']}"

    def make_directory(self, path: str, parents: bool = False) -> str:
        data, error = self._call('POST', '/directories', json={'path': path, 'parents': parents})
        if error:
            return error
        return f"{GREEN}Created directory{RESET} {data['path']}"

    def list_children(self, path: str) -> str:
        data, error = self._call('GET', '/directories/children', params={'path': path})
        if error:
            return error
        children = data['children']
        if not children:
            return f"{data['path']} is empty"
        lines = [f"{len(children)} entr{'y' if len(children) == 1 else 'ies'} in {data['path']}:"]
        lines.extend(f"  {child}" for child in children)
        return "\n".join(lines)

    def exists(self, path: str) -> str:
        data, error = self._call('GET', '/paths/exists', params={'path': path})
        if error:
            return error
        return f"{data['path']} exists" if data['exists'] else f"{data['path']} does not exist"

    def stat(self, path: str) -> str:
        data, error = self._call('GET', '/paths', params={'path': path})
        if error:
            return error
        lines = [
            f"Path:     {data['path']}",
            f"Type:     {data['type']}",
        ]
        if data['is_file']:
            lines.append(f"Size:     {format_file_size(data['length'])}")
            lines.append(f"Chunk:    {data['chunk_size']} bytes")
        lines.append(f"Modified: {format_millis(data['modification_time'])}")
        return "\n".join(lines)

    def close(self) -> None:
        self.session.close()
