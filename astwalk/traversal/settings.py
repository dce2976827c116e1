from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

from dotenv import dotenv_values

from astwalk.traversal.observability import ObservabilitySettings

# ==================================================
# Walk Settings
# ==================================================

CHECK_CHILDREN_ENV = "ASTWALK_CHECK_CHILDREN"
MAX_DEPTH_ENV = "ASTWALK_MAX_DEPTH"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class WalkSettings:
    """
    Settings shared by every walk performed by a visitor.
    """

    check_children: bool = True
    max_depth: int | None = None
    observability: ObservabilitySettings | None = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError("max_depth must be >= 1")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        env_file: str | os.PathLike[str] | None = None,
        observability: ObservabilitySettings | None = None,
    ) -> WalkSettings:
        """
        Builds settings from ASTWALK_* variables, falling back to defaults.
        Values from `env_file` (dotenv format) are used only where the environment has none.
        """
        env: dict[str, str] = {}
        if env_file is not None:
            env.update({key: value for key, value in dotenv_values(env_file).items() if value is not None})
        env.update(os.environ if environ is None else environ)

        check_children = True
        raw_check = env.get(CHECK_CHILDREN_ENV)
        if raw_check is not None and raw_check.strip():
            check_children = _parse_bool(CHECK_CHILDREN_ENV, raw_check)

        max_depth = None
        raw_depth = env.get(MAX_DEPTH_ENV)
        if raw_depth is not None and raw_depth.strip():
            try:
                max_depth = int(raw_depth)
            except ValueError as exc:
                raise ValueError(f"{MAX_DEPTH_ENV} must be an integer, got {raw_depth!r}") from exc

        return cls(
            check_children=check_children,
            max_depth=max_depth,
            observability=observability,
        )


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")
