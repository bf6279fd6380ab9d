from __future__ import annotations
import sys, datetime as _dt, json
from typing import Any, Dict, TypeVar

from .option import Option, _check

T = TypeVar("T")

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class ConsoleLogger:
    """Writes one stderr line per traced option, as text or compact JSON."""

    def __init__(self, name: str = "optionpy", level: str = "DEBUG", json_output: bool = False):
        self.name = name
        self.threshold = _LEVELS.get(level.upper(), 10)
        self.json_output = json_output

    def set_level(self, level: str) -> None:
        self.threshold = _LEVELS.get(level.upper(), self.threshold)

    def enabled(self, level: str) -> bool:
        return _LEVELS.get(level.upper(), 20) >= self.threshold

    def emit(self, level: str, label: str, fields: Dict[str, Any]) -> None:
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        if self.json_output:
            rec = {"ts": ts, "name": self.name, "level": level.upper(), "label": label, **fields}
            print(json.dumps(rec, separators=(",", ":")), file=sys.stderr)
        else:
            extras = "".join(f" {k}={v}" for k, v in fields.items())
            print(f"[{ts}] {self.name} {level.upper()}: {label}{extras}", file=sys.stderr)


def trace(opt: Option[T], logger: ConsoleLogger, label: str, level: str = "DEBUG") -> Option[T]:
    """Log which variant ``opt`` is and hand it back untouched.

    Meant to be dropped between ``map``/``flat_map`` steps while debugging a
    chain. The payload is only ``repr``-ed when the record is actually written.
    """
    _check(opt)
    if logger.enabled(level):
        fields: Dict[str, Any] = {"kind": opt.kind}
        if opt.is_some():
            fields["value"] = repr(opt.value)  # type: ignore[attr-defined]
        logger.emit(level, label, fields)
    return opt
