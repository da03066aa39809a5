"""Big Two agents - seats that plug into the turn engine."""

from .base_agent import BaseAgent
from .cpu_agent import CPUAgent, choose_play, create_cpu_agent
from .human_agent import HumanAgent, create_human_agent
from .remote_agent import RemoteAgent

__all__ = [
    "BaseAgent",
    "CPUAgent",
    "HumanAgent",
    "RemoteAgent",
    "choose_play",
    "create_cpu_agent",
    "create_human_agent",
]
