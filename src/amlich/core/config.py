from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidInputError

logger = logging.getLogger(__name__)

ENV_TZ_HOURS = "AMLICH_TZ_HOURS"
ENV_LEAP_SCAN_CAP = "AMLICH_LEAP_SCAN_CAP"


@dataclass(frozen=True)
class AmlichConfig:
    """
    Parameters threaded through every astronomical computation.

    tz_hours:       local time-zone offset east of UTC; 7.0 is Vietnam (UTC+7)
    leap_scan_cap:  iteration bound of the leap-month scan
    """
    tz_hours: float = 7.0
    leap_scan_cap: int = 14

    def __post_init__(self) -> None:
        if not (-12.0 <= self.tz_hours <= 14.0):
            raise InvalidInputError(f"tz_hours must be within [-12, 14], got {self.tz_hours}")
        if self.leap_scan_cap < 2:
            raise InvalidInputError(f"leap_scan_cap must be >= 2, got {self.leap_scan_cap}")

    def replace(self, **changes: Any) -> "AmlichConfig":
        return replace(self, **changes)

    def info(self) -> Dict[str, object]:
        return {"tz_hours": self.tz_hours, "leap_scan_cap": self.leap_scan_cap}

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AmlichConfig":
        """
        Defaults overridden by AMLICH_TZ_HOURS / AMLICH_LEAP_SCAN_CAP.
        """
        env = os.environ if environ is None else environ
        changes: Dict[str, Any] = {}

        raw = env.get(ENV_TZ_HOURS)
        if raw is not None:
            try:
                changes["tz_hours"] = float(raw)
            except ValueError as e:
                raise InvalidInputError(f"{ENV_TZ_HOURS} is not a number: {raw!r}") from e

        raw = env.get(ENV_LEAP_SCAN_CAP)
        if raw is not None:
            try:
                changes["leap_scan_cap"] = int(raw)
            except ValueError as e:
                raise InvalidInputError(f"{ENV_LEAP_SCAN_CAP} is not an integer: {raw!r}") from e

        cfg = cls(**changes)
        if changes:
            logger.debug("Configuration from environment: %s", cfg.info())
        return cfg


DEFAULT_CONFIG = AmlichConfig()
