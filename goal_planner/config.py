"""Policy constants and environment-driven settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Spread applied around the expected return to build optimistic/conservative bands.
SCENARIO_VOLATILITY = 0.15
# Conservative band never drops below this annual return.
CONSERVATIVE_RETURN_FLOOR = 0.01
# 100 years; a horizon that needs more than this is reported as unreachable.
MAX_HORIZON_MONTHS = 1200
# Upper bound on points emitted for a single trajectory.
TRAJECTORY_POINT_LIMIT = 600

DEFAULT_SAVINGS_RATE = 0.002
DEFAULT_INVESTMENT_RETURN = 0.05
AFFORDABILITY_SAFETY_MARGIN_PCT = 20.0

# (label, years, annual rate) offered when comparing loan lengths.
DEFAULT_LOAN_OFFERS = (
    ("short", 5, 0.025),
    ("medium", 10, 0.03),
    ("long", 20, 0.035),
)
# Share of gross annual income that may go to loan payments.
MAX_PAYMENT_TO_INCOME = 0.25


class Settings(BaseSettings):
    """Runtime configuration for the HTTP adapter."""

    model_config = SettingsConfigDict(
        env_prefix="GOAL_PLANNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ]
    )

    scenario_volatility: float = Field(default=SCENARIO_VOLATILITY, ge=0)
    conservative_return_floor: float = Field(default=CONSERVATIVE_RETURN_FLOOR)
    max_horizon_months: int = Field(default=MAX_HORIZON_MONTHS, ge=1)
    trajectory_point_limit: int = Field(default=TRAJECTORY_POINT_LIMIT, ge=1)
    affordability_safety_margin_pct: float = Field(
        default=AFFORDABILITY_SAFETY_MARGIN_PCT, ge=0, le=100
    )


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> Settings:
    """Return cached settings, or a fresh instance when overrides are given."""
    if overrides:
        return Settings(**overrides)
    return Settings()
