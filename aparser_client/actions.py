"""ABOUTME: Action catalogue for the A-Parser API.

Enumerates the wire action names the service accepts, the documented values
for task status changes, queue moves and query sources, and assembles the
parameter object for ``addTask``.
"""

import copy
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from .errors import InvalidArgumentError


class Action(str, Enum):
    """Wire action names (case-sensitive)."""

    PING = "ping"
    INFO = "info"
    GET_PROXIES = "getProxies"
    SET_PROXY_CHECKER_PRESET = "setProxyCheckerPreset"
    ONE_REQUEST = "oneRequest"
    BULK_REQUEST = "bulkRequest"
    GET_PARSER_PRESET = "getParserPreset"
    ADD_TASK = "addTask"
    GET_TASK_STATE = "getTaskState"
    GET_TASK_CONF = "getTaskConf"
    GET_TASK_RESULTS_FILE = "getTaskResultsFile"
    DELETE_TASK_RESULTS_FILE = "deleteTaskResultsFile"
    GET_TASKS_LIST = "getTasksList"
    CHANGE_TASK_STATUS = "changeTaskStatus"
    MOVE_TASK = "moveTask"
    GET_PARSER_INFO = "getParserInfo"


class TaskStatus(str, Enum):
    """Values accepted by changeTaskStatus. Not enforced client-side."""

    STARTING = "starting"
    PAUSING = "pausing"
    STOPPING = "stopping"
    DELETING = "deleting"


class MoveDirection(str, Enum):
    """Values accepted by moveTask. Not enforced client-side."""

    START = "start"
    END = "end"
    UP = "up"
    DOWN = "down"


class QueriesFrom(str, Enum):
    """Where a new task takes its queries from."""

    FILE = "file"
    TEXT = "text"


DEFAULT_PRESET = "default"

# Task fields sent when no task preset is named
TASK_DEFAULTS: Dict[str, Any] = {
    "resultsFileName": "$datefile.format().txt",
    "parsers": [],
    "uniqueQueries": 0,
    "keepUnique": 0,
    "resultsPrepend": "",
    "moreOptions": "",
    "resultsUnique": "no",
    "doLog": "no",
    "queryFormat": "$query",
    "resultsSaveTo": "file",
    "configOverrides": {},
    "resultsFormat": "",
    "resultsAppend": "",
    "queryBuilders": [],
    "resultsBuilders": [],
}


def build_add_task_data(
    config_preset: Optional[str],
    task_preset: Optional[str],
    queries_from: str,
    queries: Optional[List[str]],
    options: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Assemble the ``data`` object for the addTask action.

    A named task preset suppresses every task field, letting the server load
    them from the preset. Without one, each field in TASK_DEFAULTS is taken
    from ``options`` when set there.

    Args:
        config_preset: Config preset name ("default" when empty)
        task_preset: Task preset name, or empty to send explicit fields
        queries_from: "file" or "text"
        queries: Queries for a text source
        options: Task field overrides, plus ``queriesFile`` for a file source

    Returns:
        Parameter object for addTask

    Raises:
        InvalidArgumentError: If queries_from is neither "file" nor "text"
    """
    options = options or {}
    data: Dict[str, Any] = {"configPreset": config_preset or DEFAULT_PRESET}

    if task_preset:
        data["preset"] = task_preset
    else:
        for field, default in TASK_DEFAULTS.items():
            value = options.get(field)
            data[field] = value if value is not None else copy.copy(default)

    if queries_from == QueriesFrom.FILE:
        data["queriesFrom"] = QueriesFrom.FILE.value
        # false, not null, when no file is given
        queries_file = options.get("queriesFile")
        data["queriesFile"] = queries_file if queries_file is not None else False
    elif queries_from == QueriesFrom.TEXT:
        data["queriesFrom"] = QueriesFrom.TEXT.value
        data["queries"] = queries or []
    else:
        raise InvalidArgumentError(f"Unsupported queries source: {queries_from!r}")

    return data
