from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_AVATAR_BASE_URL = "https://robohash.org/"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AvatarRules(BaseModel):
    base_url: str = DEFAULT_AVATAR_BASE_URL

    @field_validator("base_url")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("avatar.base_url must not be empty")
        return value

class ClockRules(BaseModel):
    # None means the system local timezone
    tz_name: str | None = None

    @field_validator("tz_name")
    @classmethod
    def _known_zone(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"clock.tz_name is not a known IANA zone: {value!r}") from e
        return value

class ReportRules(BaseModel):
    prefix: str = "=> "

class LoggingRules(BaseModel):
    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {', '.join(LOG_LEVELS)}")
        return level

class Rules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    avatar: AvatarRules = Field(default_factory=AvatarRules)
    clock: ClockRules = Field(default_factory=ClockRules)
    report: ReportRules = Field(default_factory=ReportRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)


def default_rules() -> Rules:
    return Rules()
