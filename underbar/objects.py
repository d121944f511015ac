from .types import *


def _check_mapping(value: Any, role: str) -> None:
    if not is_mapping(value):
        raise TypeMismatch(f"{role} must be a mapping, got {type(value).__name__}")


def extend(target: Dict[K, V], *sources: Mapping[K, V]) -> Dict[K, V]:
    """copy every key of every source into target; later sources win"""
    _check_mapping(target, "target")
    for source in sources:
        _check_mapping(source, "source")
        target.update(source)
    return target


def defaults(target: Dict[K, V], *sources: Mapping[K, V]) -> Dict[K, V]:
    """fill in keys target does not have yet; earlier sources win"""
    _check_mapping(target, "target")
    for source in sources:
        _check_mapping(source, "source")
        for key, value in source.items():
            target.setdefault(key, value)
    return target
