# Environment variable table access behind a small get/set/remove interface.
import os
from typing import Dict, List, Optional, Protocol, Tuple


class Environ(Protocol):
    def get(self, name: str) -> Optional[str]: ...

    def set(self, name: str, value: str) -> None: ...

    def remove(self, name: str) -> None: ...

    def items(self) -> List[Tuple[str, str]]: ...


# Process environment backed by os.environ.
class OsEnviron:
    def get(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def set(self, name: str, value: str) -> None:
        os.environ[name] = value

    def remove(self, name: str) -> None:
        os.environ.pop(name, None)

    def items(self) -> List[Tuple[str, str]]:
        return list(os.environ.items())


# Private dict-backed table for tests and dry runs.
class MemoryEnviron:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._vars: Dict[str, str] = dict(initial) if initial else {}

    def get(self, name: str) -> Optional[str]:
        return self._vars.get(name)

    def set(self, name: str, value: str) -> None:
        self._vars[name] = value

    def remove(self, name: str) -> None:
        self._vars.pop(name, None)

    def items(self) -> List[Tuple[str, str]]:
        return list(self._vars.items())

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __len__(self) -> int:
        return len(self._vars)


_process_environ = OsEnviron()


def default_environ() -> Environ:
    return _process_environ


def resolve_environ(environ: Optional[Environ]) -> Environ:
    return default_environ() if environ is None else environ


# Look up a single variable, returning None when it is not set.
def get_key(name: str, environ: Optional[Environ] = None) -> Optional[str]:
    return resolve_environ(environ).get(name)


# Copy the whole table; later changes to the environment do not affect it.
def environ_snapshot(environ: Optional[Environ] = None) -> Dict[str, str]:
    return dict(resolve_environ(environ).items())
