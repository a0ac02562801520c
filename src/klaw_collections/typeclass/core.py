"""@typeclass decorator and dispatch mechanism.

Dispatches a function on the runtime type of its first argument. Collection
helpers use it to pick a membership strategy per container kind and an
ordering kind per sort-field value.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

__all__ = ['TypeClass', 'typeclass']

F = TypeVar('F', bound=Callable[..., Any])


class TypeClass(wrapt.ObjectProxy, Generic[F]):
    """A function with type-specific instances and a fallback body.

    Lookup order for the first argument's type:

    1. an instance registered for exactly that type,
    2. an instance registered for a class in its MRO,
    3. an instance registered for an ABC the value is an instance of
       (e.g. `collections.abc.Mapping`), in registration order,
    4. the decorated function itself.

    Resolved types are cached; registering a new instance clears the cache.

    Attributes:
        _self_name: The name of the typeclass function.
        _self_fallback: The decorated function, called when nothing matches.
        _self_instances: Registered implementations keyed by type.
        _self_cache: Resolved implementation per concrete type.

    Example:
        ```python
        @typeclass
        def describe(value) -> str:
            return 'something'

        @describe.instance(int, float)
        def describe_number(value) -> str:
            return 'number'

        describe(1.5)
        # 'number'
        describe(object())
        # 'something'
        ```
    """

    def __init__(self, fallback: F) -> None:
        super().__init__(fallback)
        self._self_name = fallback.__name__
        self._self_fallback = fallback
        self._self_instances: dict[type, Callable[..., Any]] = {}
        self._self_cache: dict[type, Callable[..., Any]] = {}

    def instance(self, *types: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an implementation for one or more types.

        Args:
            *types: The types (concrete classes or ABCs) to register for.

        Returns:
            A decorator that registers the implementation and returns it unchanged.
        """
        if not types:
            raise TypeError(f'{self._self_name}.instance() requires at least one type')

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            for type_ in types:
                self._self_instances[type_] = fn
            self._self_cache.clear()
            return fn

        return decorator

    def dispatch(self, value_type: type) -> Callable[..., Any]:
        """Return the implementation that would handle a value of value_type."""
        cached = self._self_cache.get(value_type)
        if cached is not None:
            return cached

        resolved = self._resolve(value_type)
        self._self_cache[value_type] = resolved
        return resolved

    def _resolve(self, value_type: type) -> Callable[..., Any]:
        for base in value_type.__mro__:
            if base in self._self_instances:
                return self._self_instances[base]

        # Virtual subclasses never show up in the MRO
        for registered, fn in self._self_instances.items():
            if issubclass(value_type, registered):
                return fn

        return self._self_fallback

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if not args:
            raise TypeError(f'{self._self_name}() requires at least one argument')
        return self.dispatch(type(args[0]))(*args, **kwargs)

    def __repr__(self) -> str:
        return f'<typeclass {self._self_name} with {len(self._self_instances)} instances>'


def typeclass(fn: F) -> TypeClass[F]:
    """Decorator to create a typeclass whose body is the fallback implementation.

    Args:
        fn: The function defining the signature and the behavior for
            unregistered types.

    Returns:
        A TypeClass that dispatches to registered instances.
    """
    return TypeClass(fn)
