"""
A-Parser API client.

Wraps each API action in a typed method, injects the shared password, and
unwraps the service's success/failure envelope.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from .actions import DEFAULT_PRESET, Action, build_add_task_data
from .config import AparserSettings
from .envelope import decode_response, encode_request
from .errors import AparserError, ConfigurationError, InvalidArgumentError
from .transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)


class AparserClient:
    """Client for the A-Parser HTTP API."""

    def __init__(
        self,
        url: str,
        password: str,
        options: Optional[Mapping[str, Any]] = None,
        transport: Optional[Transport] = None,
    ):
        """
        Initialize A-Parser client.

        URL and password are only checked when an action is called.

        Args:
            url: API endpoint (e.g., http://127.0.0.1:9091/API)
            password: API password set in the A-Parser settings
            options: Caller-side options to register up front
            transport: Request transport (defaults to HttpxTransport)
        """
        self.url = url
        self.password = password
        self.options: Dict[str, Any] = {}
        for name, value in (options or {}).items():
            self.add_option(name, value)

        self._owns_transport = transport is None
        self.transport = transport if transport is not None else HttpxTransport()

        logger.info(f"Initialized A-Parser client for {self.url}")

    @classmethod
    def from_settings(
        cls,
        settings: Optional[AparserSettings] = None,
        **kwargs: Any,
    ) -> "AparserClient":
        """Build a client from APARSER_* environment settings."""
        settings = settings or AparserSettings()
        transport = kwargs.pop("transport", None)

        client = cls(
            settings.url,
            settings.password,
            transport=transport or HttpxTransport(timeout=settings.timeout),
            **kwargs,
        )
        client._owns_transport = transport is None
        return client

    # ------------------------------------------------------------------
    # Handle configuration
    # ------------------------------------------------------------------

    def set_url(self, url: str):
        self.url = url

    def set_password(self, password: str):
        self.password = password

    def add_option(self, name: str, value: Any = None):
        """Register an option, overwriting any previous value."""
        self.options[name] = value

    def set_option(self, name: str, value: Any):
        """
        Change a registered option.

        Raises:
            InvalidArgumentError: If the option was never added
        """
        if not self.has_option(name):
            raise InvalidArgumentError(
                f"{type(self).__name__} does not support the following option: '{name}'."
            )
        self.options[name] = value

    def get_option(self, name: str) -> Any:
        """Return an option value, or None when it is unknown."""
        return self.options.get(name)

    def has_option(self, name: str) -> bool:
        return name in self.options

    def _get_url(self) -> str:
        if not isinstance(self.url, str) or not self.url:
            raise ConfigurationError("Current URL is incorrect!")
        return self.url

    def _get_password(self) -> str:
        if not isinstance(self.password, str) or not self.password:
            raise ConfigurationError("Current password is incorrect!")
        return self.password

    # ------------------------------------------------------------------
    # Request plumbing
    # ------------------------------------------------------------------

    def make_request(self, action: Action, data: Optional[Dict[str, Any]] = None) -> Any:
        """
        Send one action to the service.

        Args:
            action: Wire action
            data: Action parameters (omitted from the envelope when empty)

        Returns:
            Unwrapped ``data`` from the reply, or True if it carried none

        Raises:
            ConfigurationError: If URL or password is empty
            TransportError: On delivery failure or malformed reply
            ServiceError: If the service reports failure
        """
        try:
            action = Action(action)
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown action: {action!r}") from e

        url = self._get_url()
        body = encode_request(action, self._get_password(), data)

        logger.debug(f"A-Parser request: {action.value} ({len(body)} bytes)")
        raw = self.transport.send(url, body)

        try:
            return decode_response(raw)
        except AparserError as e:
            logger.warning(f"A-Parser action {action.value} failed: {e}")
            raise

    def close(self):
        """Close the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "AparserClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    # ------------------------------------------------------------------
    # Service information
    # ------------------------------------------------------------------

    def ping(self) -> Any:
        """Check the service is alive; it answers "pong"."""
        return self.make_request(Action.PING)

    def info(self) -> Any:
        """Return general service information (pid, version, task queue)."""
        return self.make_request(Action.INFO)

    def get_proxies(self) -> Any:
        """Return the list of live proxies."""
        return self.make_request(Action.GET_PROXIES)

    def set_proxy_checker_preset(self, preset: str = DEFAULT_PRESET) -> Any:
        return self.make_request(Action.SET_PROXY_CHECKER_PRESET, {"preset": preset})

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def one_request(
        self,
        query: str,
        parser: str,
        preset: str = DEFAULT_PRESET,
        raw_results: int = 0,
        options: Optional[Any] = None,
    ) -> Any:
        """
        Parse a single query with any parser and preset.

        Results are formatted by the preset's result format and come back
        together with the full parser log.

        Args:
            query: Query to parse
            parser: Parser name (e.g., SE::Google)
            preset: Parser preset
            raw_results: 1 to return raw results instead of formatted ones
            options: Parser option overrides

        Returns:
            Parsing results
        """
        return self.make_request(
            Action.ONE_REQUEST,
            {
                "query": query,
                "parser": parser,
                "preset": preset,
                "rawResults": raw_results,
                "options": options if options is not None else {},
            },
        )

    def bulk_request(
        self,
        queries: List[str],
        parser: str,
        preset: str = DEFAULT_PRESET,
        threads: int = 5,
        raw_results: int = 0,
        options: Optional[Any] = None,
    ) -> Any:
        """
        Parse a batch of queries in several threads.

        Args:
            queries: Queries to parse, in order
            parser: Parser name
            preset: Parser preset
            threads: Number of parsing threads
            raw_results: 1 to return raw results instead of formatted ones
            options: Parser option overrides

        Returns:
            Parsing results with a log for each thread
        """
        return self.make_request(
            Action.BULK_REQUEST,
            {
                "queries": queries,
                "parser": parser,
                "preset": preset,
                "threads": threads,
                "rawResults": raw_results,
                "options": options if options is not None else {},
            },
        )

    def get_parser_preset(self, parser: str, preset: str = DEFAULT_PRESET) -> Any:
        """Return the settings of a parser preset."""
        return self.make_request(
            Action.GET_PARSER_PRESET,
            {"parser": parser, "preset": preset},
        )

    def get_parser_info(self, parser: str = DEFAULT_PRESET) -> Any:
        return self.make_request(Action.GET_PARSER_INFO, {"parser": parser})

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    def add_task(
        self,
        config_preset: Optional[str],
        task_preset: Optional[str],
        queries_from: str,
        queries: Optional[List[str]],
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Add a task to the queue, as the Add Task screen does.

        Args:
            config_preset: Config preset ("default" when empty)
            task_preset: Task preset; when empty, task fields are sent explicitly
            queries_from: "file" or "text"
            queries: Queries for a text source
            options: Task field overrides and ``queriesFile``

        Returns:
            taskUid of the new task

        Raises:
            InvalidArgumentError: If queries_from is not "file" or "text"
        """
        data = build_add_task_data(config_preset, task_preset, queries_from, queries, options)
        return self.make_request(Action.ADD_TASK, data)

    def get_task_state(self, task_uid: Any) -> Any:
        """Return the state of a task."""
        return self.make_request(Action.GET_TASK_STATE, {"taskUid": task_uid})

    def get_task_conf(self, task_uid: Any) -> Any:
        """Return the configuration of a task."""
        return self.make_request(Action.GET_TASK_CONF, {"taskUid": task_uid})

    def get_task_results_file(self, task_uid: Any) -> Any:
        """Return a download link for the task's results file."""
        return self.make_request(Action.GET_TASK_RESULTS_FILE, {"taskUid": task_uid})

    def delete_task_results_file(self, task_uid: Any) -> Any:
        return self.make_request(Action.DELETE_TASK_RESULTS_FILE, {"taskUid": task_uid})

    def get_tasks_list(self, completed: Any = None) -> Any:
        """
        List tasks.

        The server treats a request without ``completed`` as a query for
        active tasks, so ``completed=1`` is sent with no parameters and every
        other value is passed through as is.
        """
        if type(completed) is int and completed == 1:
            return self.make_request(Action.GET_TASKS_LIST)
        return self.make_request(Action.GET_TASKS_LIST, {"completed": completed})

    def change_task_status(self, task_uid: Any, to_status: str) -> Any:
        """Change task status: starting, pausing, stopping or deleting."""
        return self.make_request(
            Action.CHANGE_TASK_STATUS,
            {"taskUid": task_uid, "toStatus": to_status},
        )

    def move_task(self, task_uid: Any, direction: str) -> Any:
        """Move a task in the queue: start, end, up or down."""
        return self.make_request(
            Action.MOVE_TASK,
            {"taskUid": task_uid, "direction": direction},
        )
