from abc import ABC, abstractmethod
from typing import Any, Dict


class Provider(ABC):
    """Base provider interface"""

    name: str
    timeout_s: int = 10

    @abstractmethod
    async def ready(self) -> bool:
        """Check if provider is ready to serve requests"""
        pass

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        """Return provider health status"""
        pass


class ExecutionStatusProvider(Provider):
    """Provider tracking the lifecycle of a cross-chain swap"""

    @abstractmethod
    async def get_execution_status(self, deposit_address: str) -> Dict[str, Any]:
        """Get the raw status payload for a swap keyed by its deposit address"""
        pass
