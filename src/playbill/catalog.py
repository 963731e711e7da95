import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping, Union

from .exceptions import InvalidInputError
from .models import Invoice, Performance, Play


def _require(raw: Mapping[str, Any], key: str, kind: type, where: str) -> Any:
    if not isinstance(raw, Mapping):
        raise InvalidInputError(f"{where}: expected an object, got {type(raw).__name__}")
    if key not in raw:
        raise InvalidInputError(f"{where}: missing field {key!r}")
    value = raw[key]
    if isinstance(value, bool) or not isinstance(value, kind):
        raise InvalidInputError(f"{where}: field {key!r} must be {kind.__name__}, got {value!r}")
    return value


def _read_json(path: Union[str, Path]) -> Any:
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidInputError(f"Cannot read JSON from {path}: {exc}") from exc


def plays_from_dict(raw: Mapping[str, Any]) -> Mapping[str, Play]:
    """Build a read-only play catalog from ``{"hamlet": {"name": ..., "type": ...}}``."""
    if not isinstance(raw, Mapping):
        raise InvalidInputError(f"Play catalog must be an object, got {type(raw).__name__}")
    plays = {
        play_id: Play(
            name=_require(entry, "name", str, f"play {play_id!r}"),
            type=_require(entry, "type", str, f"play {play_id!r}"),
        )
        for play_id, entry in raw.items()
    }
    return MappingProxyType(plays)


def invoice_from_dict(raw: Mapping[str, Any]) -> Invoice:
    customer = _require(raw, "customer", str, "invoice")
    where = f"invoice for {customer!r}"
    performances = [
        Performance(
            play_id=_require(p, "playID", str, where),
            audience=_require(p, "audience", int, where),
        )
        for p in _require(raw, "performances", list, where)
    ]
    return Invoice(customer=customer, performances=performances)


def load_plays(path: Union[str, Path]) -> Mapping[str, Play]:
    return plays_from_dict(_read_json(path))


def load_invoices(path: Union[str, Path]) -> List[Invoice]:
    raw = _read_json(path)
    if not isinstance(raw, list):
        raise InvalidInputError(f"{path}: expected a list of invoices")
    return [invoice_from_dict(entry) for entry in raw]
