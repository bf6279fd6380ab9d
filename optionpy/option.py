from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import MISSING, dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, final

if TYPE_CHECKING:
    from dataclasses import _MISSING_TYPE

T = TypeVar("T")
U = TypeVar("U")

_VARIANTS = ("Some", "_None")


class Option(Generic[T], ABC):
    __slots__ = ()
    kind: str

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__qualname__ not in _VARIANTS:
            raise TypeError(f"Option is closed: cannot subclass with {cls.__qualname__}")

    @abstractmethod
    def is_some(self) -> bool: ...
    def is_none(self) -> bool: return not self.is_some()

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return NONE

    def unwrap_or(self, default: U) -> T | U:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    def to_nullable(self) -> T | None:
        return self.value if self.is_some() else None  # type: ignore[attr-defined]

    def to_missing(self) -> T | _MISSING_TYPE:
        return self.value if self.is_some() else MISSING  # type: ignore[attr-defined]

    def match(self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        if self.is_some():
            return some(self.value)  # type: ignore[attr-defined]
        return none()


@final
@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    kind = "some"
    def is_some(self) -> bool: return True


@final
class _None(Option[Any]):
    __slots__ = ()
    kind = "none"
    _instance: "_None | None" = None

    def __new__(cls) -> "_None":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "NONE"
    # copy, deepcopy and pickle all resolve back to the module singleton
    def __reduce__(self) -> str: return "NONE"
    def is_some(self) -> bool: return False


NONE: Option[Any] = _None()


def _check(opt: Any) -> Option[Any]:
    if not isinstance(opt, Option):
        raise TypeError(f"expected Option, got {type(opt).__name__}")
    return opt


def some(value: T) -> Option[T]:
    return Some(value)


def none() -> Option[Any]:
    return NONE


def from_nullable(v: T | None | _MISSING_TYPE) -> Option[T]:
    """Collapse both absent conventions, ``None`` and ``MISSING``, into ``NONE``.

    Sentinels are compared by identity, so falsy payloads (``0``, ``""``,
    ``False``, NaN) stay present.
    """
    if v is None or v is MISSING:
        return NONE
    return Some(v)  # type: ignore[arg-type]


def is_some(opt: Option[T]) -> bool:
    return _check(opt).is_some()


def is_none(opt: Option[T]) -> bool:
    return _check(opt).is_none()


def unwrap_or(opt: Option[T], default: U) -> T | U:
    return _check(opt).unwrap_or(default)


def to_nullable(opt: Option[T]) -> T | None:
    return _check(opt).to_nullable()


def to_missing(opt: Option[T]) -> T | _MISSING_TYPE:
    return _check(opt).to_missing()


def map(opt: Option[T], f: Callable[[T], U]) -> Option[U]:
    return _check(opt).map(f)


def flat_map(opt: Option[T], f: Callable[[T], Option[U]]) -> Option[U]:
    return _check(opt).flat_map(f)


def match(opt: Option[T], *, some: Callable[[T], U], none: Callable[[], U]) -> U:
    """Dispatch to exactly one handler.

    Both handlers are keyword-only and required, so forgetting the absent
    branch is a ``TypeError`` at the call site rather than a silent skip.
    """
    return _check(opt).match(some=some, none=none)
