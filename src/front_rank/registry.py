"""Registry system for ranking strategies.

This module provides a registry pattern for managing rankers. Instead of
hardcoding a ranker, users can register factories that create configured
rankers and retrieve them by name.

The registry pattern enables:
- **Pluggable strategies**: Swap ranking methods without code changes
- **Configuration-driven experiments**: Select a ranker by string name from config files
- **Discoverability**: List all available rankers programmatically
- **Factory pattern**: Register functions that create configured rankers

Basic usage:
    ```python
    from front_rank.registry import RankerRegistry, list_rankers

    # Register a ranker factory
    def my_factory():
        def ranker(individuals):
            # Implementation here
            ...
        return ranker

    RankerRegistry.register("mine", my_factory)

    # Get a configured ranker
    ranker = RankerRegistry.get("mine")

    # List available rankers
    available = list_rankers()  # ["mine", "nsga2", "simple"]
    ```
"""

from collections.abc import Callable

from front_rank.protocols import Ranker


class RankerRegistry:
    """Registry for ranking strategies.

    This class provides a class-level registry of ranker factories.
    Rankers are registered by name and can be retrieved with custom
    configuration parameters.

    Class Attributes:
        _registry: Dictionary mapping ranker names to factory functions.
    """

    _registry: dict[str, Callable[..., Ranker]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., Ranker]) -> None:
        """Register a ranker factory.

        Args:
            name: Unique name for the ranker. Will overwrite if already exists.
            factory: Callable that returns a Ranker. Should accept keyword
                arguments for configuration.
        """
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> Ranker:
        """Get a configured ranker by name.

        Args:
            name: Name of the registered ranker.
            **kwargs: Configuration parameters passed to the factory function.

        Returns:
            A configured Ranker callable.

        Raises:
            KeyError: If the ranker name is not registered. Error message
                includes list of available rankers.

        Example:
            ```python
            ranker = RankerRegistry.get("nsga2")
            result = ranker(population.members)
            ```
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Ranker '{name}' not found. Available rankers: {available}")
        factory = cls._registry[name]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return sorted list of registered ranker names."""
        return sorted(cls._registry.keys())


def list_rankers() -> list[str]:
    """List all registered rankers.

    Convenience function that returns RankerRegistry.list().
    """
    return RankerRegistry.list()
