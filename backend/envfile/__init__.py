# Load and unload .env style KEY=VALUE files into the process environment.
from envfile.config import LoaderSettings, get_settings
from envfile.environ import (
    Environ,
    MemoryEnviron,
    OsEnviron,
    default_environ,
    environ_snapshot,
    get_key,
)
from envfile.errors import EnvFileApplyError, EnvFileError, EnvFileReadError
from envfile.loader import (
    capture,
    load,
    load_from_reader,
    restore,
    set_variables,
    snapshot,
    snapshot_from_reader,
    temporary_load,
    unload,
    unload_from_reader,
    unload_keys,
    unload_pairs,
)
from envfile.parser import ParsedPair, iter_pairs, only_keys, parse_line, parse_lines

__all__ = [
    "Environ",
    "EnvFileApplyError",
    "EnvFileError",
    "EnvFileReadError",
    "LoaderSettings",
    "MemoryEnviron",
    "OsEnviron",
    "ParsedPair",
    "capture",
    "default_environ",
    "environ_snapshot",
    "get_key",
    "get_settings",
    "iter_pairs",
    "load",
    "load_from_reader",
    "only_keys",
    "parse_line",
    "parse_lines",
    "restore",
    "set_variables",
    "snapshot",
    "snapshot_from_reader",
    "temporary_load",
    "unload",
    "unload_from_reader",
    "unload_keys",
    "unload_pairs",
]
