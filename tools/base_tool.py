#!/usr/bin/env python3
from abc import ABC, abstractmethod

from typing import Dict, Any, List, Optional


class BaseTool(ABC):
    """Base class for tools exposed to a calling agent."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name used for registration and lookups."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description shown to the calling agent."""
        pass

    @abstractmethod
    def get_capabilities(self) -> List[str]:
        """Names of the async methods that can be invoked as agent tools."""
        pass

    def describe_capability(self, capability: str) -> str:
        method = getattr(self, capability)
        return (method.__doc__ or self.description).strip()
