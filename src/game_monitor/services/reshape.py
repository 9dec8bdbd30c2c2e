"""Reshaping of raw server documents into server records."""

from typing import Any

from pydantic import ValidationError

from game_monitor.domain.models import ServerRecord
from game_monitor.errors import ResponseFormatError


def force_list(value: Any) -> list[Any]:
    """Return ``value`` as a list.

    A lone element becomes a one-element list; missing values become empty.
    """
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value
    return [value]


def reshape_server_info(
    raw: dict[str, Any],
    *,
    host: str,
    port: str | int,
    updated: float,
    client_version: str,
) -> ServerRecord:
    """Turn a parsed server document into a normalized record."""
    data = dict(raw)

    players_block = data.pop("players", None)
    if not isinstance(players_block, dict):
        players_block = {}
    count = {key: value for key, value in players_block.items() if key != "player"}
    players = [
        _as_player(player) for player in force_list(players_block.get("player"))
    ]

    variables_block = data.pop("variables", None)
    if not isinstance(variables_block, dict):
        variables_block = {}
    variables: dict[str, str] = {}
    for variable in force_list(variables_block.get("variable")):
        if not isinstance(variable, dict) or variable.get("name") is None:
            continue
        variables[str(variable["name"])] = _as_text(variable.get("value"))

    if not data.get("ip"):
        data["ip"] = host
    if not data.get("port"):
        data["port"] = port
    data.update(
        count=count,
        players=players,
        variables=variables,
        updated=updated,
        client_version=client_version,
    )
    try:
        return ServerRecord.model_validate(data)
    except ValidationError as exc:
        raise ResponseFormatError(f"Unexpected server document: {exc}") from exc


def _as_player(value: Any) -> dict[str, Any]:
    if isinstance(value, dict):
        return value
    return {"name": _as_text(value)}


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, dict | list):
        return ""
    return str(value)
