from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from prioflow.core.errors import ConfigurationError
from prioflow.core.types import ScheduleStrategy
from prioflow.logger import get_logger

logger = get_logger(__name__)

STRATEGY_ENV_VAR = "PRIOFLOW_SCHEDULE_STRATEGY"


@dataclass
class SchedulerConfig:
    """Scheduler settings. Read-only during a prioritize() call."""

    strategy: ScheduleStrategy = ScheduleStrategy.BATCH

    @classmethod
    def from_env(cls) -> SchedulerConfig:
        """Load configuration from environment variables."""
        config = cls(strategy=os.getenv(STRATEGY_ENV_VAR, ScheduleStrategy.BATCH.value))
        config.validate()
        return config

    def validate(self) -> None:
        """Normalize and validate configuration values.

        Raises:
            ConfigurationError: If the strategy is unknown.
        """
        if isinstance(self.strategy, ScheduleStrategy):
            return
        try:
            self.strategy = ScheduleStrategy(str(self.strategy).strip().lower())
        except ValueError as exc:
            valid = tuple(s.value for s in ScheduleStrategy)
            raise ConfigurationError(
                f"strategy must be one of {valid}, got '{self.strategy}'",
                what="Invalid scheduler configuration",
                why=f"strategy must be one of {valid}, got '{self.strategy}'",
                how_to_fix=f"Set {STRATEGY_ENV_VAR} to one of {valid}",
                context={"strategy": self.strategy},
            ) from exc


@dataclass
class ConfigManager:
    """
    Typed configuration manager for prioflow.

    Provides a single entrypoint for loading environment variables and for
    the default scheduling strategy used when prioritize() gets none.

    Usage examples
    --------------
        from prioflow.core.config_manager import get_config_manager

        cm = get_config_manager()
        cm.load_env_files([Path.cwd()/".env"], override=False)
        cm.set_default_strategy("single")
    """

    _scheduler_config: Optional[SchedulerConfig] = field(default=None)

    def load_env_files(self, paths: Iterable[Path], override: bool = False) -> Optional[Path]:
        """Load the first existing .env file from the provided paths."""
        from dotenv import load_dotenv

        for env_path in paths:
            if env_path.exists():
                load_dotenv(env_path, override=override)
                logger.debug("Loaded .env file from %s", env_path)
                # Environment may have changed; re-read lazily
                self._scheduler_config = None
                return env_path
        return None

    def get_scheduler_config(self) -> SchedulerConfig:
        if self._scheduler_config is None:
            self._scheduler_config = SchedulerConfig.from_env()
        return self._scheduler_config

    def set_default_strategy(self, strategy: Union[ScheduleStrategy, str]) -> None:
        config = SchedulerConfig(strategy=strategy)
        config.validate()
        self._scheduler_config = config

    def get_default_strategy(self) -> ScheduleStrategy:
        return self.get_scheduler_config().strategy

    def clear(self) -> None:
        self._scheduler_config = None


_config_manager = ConfigManager()


def get_config_manager() -> ConfigManager:
    return _config_manager


__all__ = ["SchedulerConfig", "ConfigManager", "get_config_manager", "STRATEGY_ENV_VAR"]
