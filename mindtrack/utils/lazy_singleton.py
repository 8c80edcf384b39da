"""
Lazy singleton proxy

Instantiates the wrapped class on first attribute access so that importing
a providers module never opens the database.
"""

import threading
from typing import TypeVar, Generic, Type, Any

T = TypeVar('T')


class LazySingleton(Generic[T]):
    """
    Lazy singleton proxy

    Usage:
        activity_provider = LazySingleton(ActivityProvider)
        activity_provider.find_records(...)  # instance created here

    Thread safe (double-checked locking). ``reset()`` drops the instance so
    the next access builds a fresh one, e.g. after the database path changed.
    """

    _SLOTS = ('_cls', '_args', '_kwargs', '_instance', '_lock')

    def __init__(self, cls: Type[T], *args, **kwargs):
        # object.__setattr__ keeps __setattr__ from forwarding
        object.__setattr__(self, '_cls', cls)
        object.__setattr__(self, '_args', args)
        object.__setattr__(self, '_kwargs', kwargs)
        object.__setattr__(self, '_instance', None)
        object.__setattr__(self, '_lock', threading.Lock())

    def _ensure_initialized(self) -> T:
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    instance = self._cls(*self._args, **self._kwargs)
                    object.__setattr__(self, '_instance', instance)
        return self._instance

    def reset(self) -> None:
        """Forget the current instance"""
        with self._lock:
            object.__setattr__(self, '_instance', None)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._ensure_initialized(), name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._SLOTS:
            object.__setattr__(self, name, value)
        else:
            setattr(self._ensure_initialized(), name, value)

    def __repr__(self) -> str:
        if self._instance is None:
            return f"<LazySingleton({self._cls.__name__}) - not initialized>"
        return repr(self._instance)
