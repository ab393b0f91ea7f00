"""Helpers for loading user-provided decision functions."""
from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from typing import Callable, Union

from robotest.core.errors import PolicyConstructionError

DecisionFn = Callable[[str, str], bool]


class CallablePort:
    """Adapts a plain ``func(user_agent, url) -> bool`` to the port interface."""

    def __init__(self, func: DecisionFn) -> None:
        self._func = func

    def decide(self, user_agent: str, url: str) -> bool:
        return bool(self._func(user_agent, url))


def load_port(spec: str, base: Union[str, Path, None] = None) -> CallablePort:
    """Build a port from ``path/to/file.py:func``."""

    source, sep, func_name = spec.rpartition(":")
    if not sep or not source or not func_name:
        raise PolicyConstructionError(f"Decider must look like 'file.py:function', got '{spec}'")
    path = Path(source).expanduser()
    if base is not None and not path.is_absolute():
        path = Path(base) / path
    return CallablePort(load_from_source(path.resolve(), func_name))


def load_from_source(path: Path, func_name: str) -> DecisionFn:
    """Load a callable named ``func_name`` from a Python file at ``path``."""

    if not path.exists():
        raise PolicyConstructionError(f"Decider source file not found: {path}")
    module_name = f"robotest_decider_{path.stem}_{hash(str(path)) & 0xFFFF:x}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise PolicyConstructionError(f"Unable to load module from {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        raise PolicyConstructionError(f"Error importing decider {path}: {exc}") from exc
    func = getattr(module, func_name, None)
    if func is None:
        raise PolicyConstructionError(f"Function '{func_name}' not found in {path}")
    if not callable(func):
        raise PolicyConstructionError(f"Attribute '{func_name}' in {path} is not callable")
    return func
