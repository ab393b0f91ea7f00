"""Decision ports consulted by the evaluation engine."""

from .custom import CallablePort, load_port
from .port import DEFAULT_AGENT, DecisionPort, RobotsPolicy

__all__ = [
    "CallablePort",
    "DEFAULT_AGENT",
    "DecisionPort",
    "RobotsPolicy",
    "load_port",
]
