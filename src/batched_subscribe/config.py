from __future__ import annotations

import configparser
import dataclasses
from dataclasses import dataclass
from pathlib import Path

import platformdirs

CONFIG_PATH = Path(platformdirs.user_config_dir("batched-subscribe")) / "config.ini"


@dataclass
class Config:
    log_level: str = "INFO"
    idle_delay_ms: int = 0
    window_geometry: str = ""

    @classmethod
    def read(cls, path: Path | None = None) -> Config:
        """Read the config file."""

        parser = configparser.RawConfigParser(defaults=cls._defaults())
        parser.read(path or CONFIG_PATH)

        return cls(
            log_level=parser.get("DEFAULT", "log_level").upper(),
            idle_delay_ms=parser.getint("DEFAULT", "idle_delay_ms"),
            window_geometry=parser.get("DEFAULT", "window_geometry"),
        )

    def write(self, path: Path | None = None) -> None:
        """Write the config file."""

        parser = configparser.RawConfigParser(defaults=self._defaults())
        parser.read_dict(
            {
                "DEFAULT": {
                    key: self._stringify_value(value)
                    for key, value in dataclasses.asdict(self).items()
                }
            }
        )

        path = path or CONFIG_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w+") as file:
            parser.write(file)

    @classmethod
    def _defaults(cls) -> dict[str, str]:
        """Return the default values for the fields."""

        return {
            field.name: cls._stringify_value(field.default)
            for field in dataclasses.fields(cls)
            if field.default is not dataclasses.MISSING
        }

    @staticmethod
    def _stringify_value(value: str | int) -> str:
        """Convert a value into a string that the parser can deal with."""

        return str(value)


config = Config.read()
