"""Resilient invocation of external analyzer services."""

from credibility_system.llm.resilient_caller import ResilientCaller, backoff_delay

__all__ = ["ResilientCaller", "backoff_delay"]
