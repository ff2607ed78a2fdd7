from __future__ import annotations

from airdensity.density.base import AirDensity

_REGISTRY: dict[str, type[AirDensity]] = {}

def register_model(cls: type[AirDensity]) -> type[AirDensity]:
    """Class decorator to register a density model by its NAME."""
    name = getattr(cls, "NAME", None)
    if not name or name == AirDensity.NAME:
        raise ValueError(f"{cls.__name__} must define NAME")
    _REGISTRY[name] = cls
    return cls

def get_model_class(name: str) -> type[AirDensity]:
    cls = _REGISTRY.get(name)
    if not cls:
        raise KeyError(f"No air density model registered for name '{name}'")
    return cls

def list_models() -> list[str]:
    return list(_REGISTRY.keys())
