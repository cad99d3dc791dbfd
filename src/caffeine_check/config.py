"""Application configuration."""

import json
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from caffeine_check.domain.assessment import AgeBracket, LimitPolicy
from caffeine_check.domain.errors import PolicyError
from caffeine_check.services.limits import build_policy

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    debug: bool = False
    limit_brackets: str | None = None

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_limit_brackets(raw: str | None) -> LimitPolicy | None:
    """Parse a JSON bracket table from env, e.g.

    ``[{"lowerBound": 0, "multiplier": 2.5, "name": "minor", "minor": true}]``
    """
    if raw is None:
        return None
    cleaned = raw.strip()
    if not cleaned:
        return None
    try:
        records = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise PolicyError("LIMIT_BRACKETS is not valid JSON") from exc
    if not isinstance(records, list):
        raise PolicyError("LIMIT_BRACKETS must be a JSON list")
    brackets = []
    for record in records:
        try:
            cap = record.get("capMg")
            minor = record.get("minor", False)
            lower_bound = float(record["lowerBound"])
            multiplier = float(record["multiplier"])
            name = str(record["name"])
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise PolicyError(f"Invalid bracket: {record!r}") from exc
        if not isinstance(minor, bool):
            raise PolicyError(f"Bracket {name} minor flag must be true or false")
        try:
            cap_mg = float(cap) if cap is not None else None
        except (TypeError, ValueError) as exc:
            raise PolicyError(f"Bracket {name} has an invalid cap") from exc
        brackets.append(
            AgeBracket(
                lower_bound=lower_bound,
                multiplier=multiplier,
                name=name,
                minor=minor,
                cap_mg=cap_mg,
            )
        )
    return build_policy(brackets)
