"""Boundary with the hosting statistical package's macro namespace."""
from __future__ import annotations
from typing import Dict, List, Mapping, Optional, Protocol

from .constants import RESULT_PREFIX


class MacroHost(Protocol):
    def read_parameter(self, name: str) -> Optional[str]:
        ...

    def write_result(self, name: str, value: str) -> None:
        ...


class MappingHost:
    """In-memory host: parameters from a mapping, results into a dict."""

    def __init__(self, parameters: Optional[Mapping[str, str]] = None) -> None:
        self.parameters: Dict[str, str] = dict(parameters or {})
        self.results: Dict[str, str] = {}

    def read_parameter(self, name: str) -> Optional[str]:
        return self.parameters.get(name)

    def write_result(self, name: str, value: str) -> None:
        self.results[name] = value


def result_names(count: int, prefix: str = RESULT_PREFIX) -> List[str]:
    """``color1`` … ``colorN``."""
    return [f"{prefix}{i}" for i in range(1, count + 1)]
