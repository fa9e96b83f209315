from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UIConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    appearance_mode: Optional[Literal["dark", "light"]] = None  # None = detect
    spinner_width: int = Field(default=20, ge=1, le=200)
    start_view: Literal["live", "stats"] = "live"
    date_range: Literal[1, 3] = 1


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    level: str = "INFO"
    path: Optional[str] = None  # None = ~/.golazo/logs/golazo.log

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}. Expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level


class DataConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    fixtures_path: Optional[str] = None  # None = bundled demo fixtures


class GolazoConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    ui: UIConfig = UIConfig()
    logging: LoggingConfig = LoggingConfig()
    data: DataConfig = DataConfig()
