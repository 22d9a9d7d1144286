"""Runtime configuration for OrderedTree instances."""

import os
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Mapping, Optional

from tree_errors import ConfigError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
TRUTHY = ("1", "true", "yes", "on")

ENV_ITERATIVE = "ORDERED_TREE_ITERATIVE"
ENV_LOG_LEVEL = "ORDERED_TREE_LOG_LEVEL"


@dataclass
class TreeSettings:
    """
    Settings shared by a tree and the trees derived from it.

    ``iterative`` swaps the call-recursive insert/remove/contains, in-order
    traversal, copy and mirror for explicit-loop versions. Both produce the
    same shapes and sequences; the loop versions are not limited by the
    interpreter's recursion limit, which matters for trees built from sorted
    input where height equals node count.
    """

    iterative: bool = False
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __post_init__(self) -> None:
        if not isinstance(self.iterative, bool):
            raise ConfigError(
                f"iterative must be a bool, got {type(self.iterative).__name__}",
                config_key="iterative",
                value=self.iterative,
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ConfigError(
                f"invalid log level: {self.log_level!r}",
                config_key="log_level",
                value=self.log_level,
            )
        self.log_level = self.log_level.upper()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> 'TreeSettings':
        valid_keys = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config.items() if k in valid_keys})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'TreeSettings':
        if environ is None:
            environ = os.environ
        config: Dict[str, Any] = {}
        if ENV_ITERATIVE in environ:
            config["iterative"] = environ[ENV_ITERATIVE].strip().lower() in TRUTHY
        if ENV_LOG_LEVEL in environ:
            config["log_level"] = environ[ENV_LOG_LEVEL].strip()
        return cls(**config)
