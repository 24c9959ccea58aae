# Apply, snapshot and revert .env files against an environment table.
import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Dict, Iterable, Iterator, List, Optional, Union

from envfile.config import get_settings
from envfile.environ import Environ, resolve_environ
from envfile.errors import EnvFileApplyError, EnvFileReadError
from envfile.parser import ParsedPair, iter_pairs

logger = logging.getLogger(__name__)

PathArg = Union[str, "os.PathLike[str]"]


def _describe(stream: IO) -> str:
    name = getattr(stream, "name", None)
    if isinstance(name, str):
        return name
    return f"<{type(stream).__name__}>"


# Yield decoded lines from a text or binary stream, wrapping read errors.
# The encoding setting is only looked up once the stream yields bytes.
def _read_lines(stream: IO, source: str) -> Iterator[str]:
    lines = None
    encoding = None
    while True:
        try:
            if lines is None:
                lines = iter(stream)
            raw = next(lines)
        except StopIteration:
            return
        except (OSError, ValueError) as exc:
            raise EnvFileReadError(
                f"Unable to read {source}: {exc}", source=source
            ) from exc
        if isinstance(raw, bytes):
            if encoding is None:
                encoding = get_settings("encoding").encoding
            try:
                raw = raw.decode(encoding)
            except UnicodeDecodeError as exc:
                raise EnvFileReadError(
                    f"Unable to decode {source} as {encoding}: {exc}", source=source
                ) from exc
        yield raw


def _stream_pairs(stream: IO) -> Iterator[ParsedPair]:
    return iter_pairs(_read_lines(stream, _describe(stream)))


@contextmanager
def _open_env_file(path: Optional[PathArg]) -> Iterator[IO[str]]:
    settings = get_settings("filename", "encoding")
    resolved = Path.cwd() / (settings.filename if path is None else path)
    try:
        handle = resolved.open("r", encoding=settings.encoding)
    except OSError as exc:
        raise EnvFileReadError(
            f"Unable to open {resolved}: {exc}", source=str(resolved)
        ) from exc
    with handle:
        yield handle


# Set each pair in the environment and return the pairs that were applied.
# A name or value the environment rejects raises EnvFileApplyError; pairs
# before it stay applied.
def set_variables(
    pairs: Iterable[ParsedPair],
    environ: Optional[Environ] = None,
    overwrite: bool = True,
) -> List[ParsedPair]:
    environ = resolve_environ(environ)
    applied: List[ParsedPair] = []
    for key, value in pairs:
        if not overwrite and environ.get(key) is not None:
            continue
        try:
            environ.set(key, value)
        except ValueError as exc:
            raise EnvFileApplyError(f"Unable to set {key!r}: {exc}", key=key) from exc
        applied.append(ParsedPair(key, value))
    return applied


def unload_keys(keys: Iterable[str], environ: Optional[Environ] = None) -> int:
    environ = resolve_environ(environ)
    count = 0
    for key in keys:
        environ.remove(key)
        count += 1
    return count


# Remove the keys of already parsed pairs; values are ignored.
def unload_pairs(
    pairs: Iterable[ParsedPair], environ: Optional[Environ] = None
) -> int:
    return unload_keys((key for key, _ in pairs), environ)


# Apply every pair read from the stream as its line arrives. A read failure
# part way through leaves the earlier pairs in place. Existing values are
# replaced unless overwrite (or ENVFILE_OVERWRITE) is false.
def load_from_reader(
    stream: IO,
    environ: Optional[Environ] = None,
    overwrite: Optional[bool] = None,
) -> None:
    if overwrite is None:
        overwrite = get_settings("overwrite").overwrite
    applied = set_variables(_stream_pairs(stream), environ, overwrite)
    logger.info("Loaded %d variables from %s", len(applied), _describe(stream))


# Parse the stream without touching the environment, keeping file order.
def snapshot_from_reader(stream: IO) -> List[ParsedPair]:
    return list(_stream_pairs(stream))


# Remove every key named in the stream; recorded values are ignored and keys
# that are not set are skipped.
def unload_from_reader(stream: IO, environ: Optional[Environ] = None) -> None:
    count = unload_pairs(_stream_pairs(stream), environ)
    logger.info("Unloaded %d variables from %s", count, _describe(stream))


# Load the default .env file (or ``path``) relative to the working directory.
def load(
    path: Optional[PathArg] = None,
    environ: Optional[Environ] = None,
    overwrite: Optional[bool] = None,
) -> None:
    with _open_env_file(path) as handle:
        load_from_reader(handle, environ, overwrite)


def snapshot(path: Optional[PathArg] = None) -> List[ParsedPair]:
    with _open_env_file(path) as handle:
        return snapshot_from_reader(handle)


def unload(path: Optional[PathArg] = None, environ: Optional[Environ] = None) -> None:
    with _open_env_file(path) as handle:
        unload_from_reader(handle, environ)


# Record the current value of each key, None meaning "not set".
def capture(
    keys: Iterable[str], environ: Optional[Environ] = None
) -> Dict[str, Optional[str]]:
    environ = resolve_environ(environ)
    return {key: environ.get(key) for key in keys}


# Put captured values back, removing keys that were not set at capture time.
def restore(
    saved: Dict[str, Optional[str]], environ: Optional[Environ] = None
) -> None:
    environ = resolve_environ(environ)
    for key, value in saved.items():
        if value is None:
            environ.remove(key)
        else:
            environ.set(key, value)


# Load a path, an open stream, or the default file for the duration of a
# with block. The source is read in full before anything is applied. On exit,
# including a failed apply, every key gets its previous value back or is
# removed if it was not set before.
@contextmanager
def temporary_load(
    source: Union[PathArg, IO, None] = None,
    environ: Optional[Environ] = None,
) -> Iterator[List[ParsedPair]]:
    if source is None or isinstance(source, (str, os.PathLike)):
        pairs = snapshot(source)
    else:
        pairs = snapshot_from_reader(source)

    environ = resolve_environ(environ)
    saved = capture(dict.fromkeys(key for key, _ in pairs), environ)
    try:
        set_variables(pairs, environ)
        yield pairs
    finally:
        restore(saved, environ)
        logger.debug("Restored %d variables after temporary load", len(saved))
