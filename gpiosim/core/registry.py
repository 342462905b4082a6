"""Controller registry and factory.

Provides discovery and instantiation of controller models that are
registered globally during module initialization.

Controller packages call register_controller() in their __init__.py, so
importing the package is enough to make its revisions available.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Type

if TYPE_CHECKING:
    from gpiosim.core.peripheral import BasePeripheral


class ControllerRegistry:
    """Registry of available controller models.

    This decouples controller discovery from controller implementation, so
    a new hardware revision only needs to register itself.

    THREAD SAFETY: Not thread-safe. All registration should happen during
    module initialization before any threads are spawned.
    """

    def __init__(self):
        self._controllers: dict[str, Type[BasePeripheral]] = {}

    def register(self, name: str, controller_class: Type[BasePeripheral]) -> None:
        """Register a controller implementation."""
        if name in self._controllers:
            raise ValueError(f"Controller '{name}' already registered")
        self._controllers[name] = controller_class

    def get(self, name: str) -> Type[BasePeripheral]:
        """Get a controller class by name."""
        if name not in self._controllers:
            raise ValueError(
                f"Unknown controller '{name}'. "
                f"Available: {list(self._controllers.keys())}"
            )
        return self._controllers[name]

    def list_controllers(self) -> list[str]:
        """List all registered controller names."""
        return list(self._controllers.keys())

    def create(self, name: str, **kwargs) -> Any:
        """Instantiate a controller by name."""
        controller_class = self.get(name)
        return controller_class(**kwargs)


# Global registry
_REGISTRY = ControllerRegistry()


def register_controller(name: str, controller_class: Type[BasePeripheral]) -> None:
    """Register a controller globally."""
    _REGISTRY.register(name, controller_class)


def get_controller(name: str) -> Type[BasePeripheral]:
    """Get a controller class by name."""
    return _REGISTRY.get(name)


def create_controller(name: str, **kwargs) -> Any:
    """Create a controller instance by name."""
    return _REGISTRY.create(name, **kwargs)


def list_available_controllers() -> list[str]:
    """List all registered controllers."""
    return _REGISTRY.list_controllers()
