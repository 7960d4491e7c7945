from .config import AgentConfig
from .logging_utils import setup_logging

__all__ = ["AgentConfig", "setup_logging"]
