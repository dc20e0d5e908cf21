from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from flightphysics.app.ticker import Ticker
    from flightphysics.view.canvas import Canvas
    from flightphysics.view.visualization import Visualization

_REGISTRY: dict[str, type[Visualization]] = {}


def register_visualization(cls: type[Visualization]) -> type[Visualization]:
    """Class decorator to register a visualization by the KEY of its canvas."""
    key = getattr(cls, "KEY", None)
    if not key:
        raise ValueError(f"{cls.__name__} must define KEY")
    existing = _REGISTRY.get(key)
    if existing is not None and existing is not cls:
        raise ValueError(f"Canvas key '{key}' is already taken by {existing.__name__}")
    _REGISTRY[key] = cls
    return cls


def visualization_class(key: str) -> type[Visualization]:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No visualization registered for key '{key}'")
    return cls


def create_visualization(key: str, surface: Optional[Canvas], ticker: Ticker, options: Any = None) -> Visualization:
    return visualization_class(key)(surface, ticker, options)


def list_keys() -> list[str]:
    return list(_REGISTRY.keys())
