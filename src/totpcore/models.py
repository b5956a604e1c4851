"""Pydantic models for engine configuration and generated secrets."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from totpcore.config import Algorithm, settings
from totpcore.exceptions import InvalidConfiguration, UnsupportedAlgorithm


class TotpOptions(BaseModel):
    """Immutable digits/period/algorithm triple held by an engine."""

    model_config = ConfigDict(frozen=True)

    digits: int = Field(default_factory=lambda: settings.default_digits, gt=0, le=10, strict=True)
    period: int = Field(default_factory=lambda: settings.default_period, gt=0, strict=True)
    algorithm: Algorithm = Field(default_factory=lambda: settings.default_algorithm)

    @field_validator("algorithm", mode="before")
    @classmethod
    def _normalize_algorithm(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @classmethod
    def build(
        cls,
        digits: int | None = None,
        period: int | None = None,
        algorithm: Algorithm | str | None = None,
    ) -> TotpOptions:
        """Validate options, falling back to settings for anything left as None.

        Raises UnsupportedAlgorithm or InvalidConfiguration instead of
        pydantic's ValidationError.
        """
        given = {"digits": digits, "period": period, "algorithm": algorithm}
        try:
            return cls(**{k: v for k, v in given.items() if v is not None})
        except ValidationError as e:
            fields = {err["loc"][0] for err in e.errors() if err["loc"]}
            if "algorithm" in fields:
                raise UnsupportedAlgorithm(
                    f"Unsupported algorithm {algorithm!r}; expected one of "
                    f"{', '.join(a.value for a in Algorithm)}"
                ) from e
            raise InvalidConfiguration(
                f"Invalid TOTP options digits={digits!r} period={period!r}: "
                "digits must be an integer in 1..10 and period a positive integer"
            ) from e


class GeneratedSecret(BaseModel):
    """A freshly provisioned secret plus the words it was derived from.

    ``words`` are for showing to a person; the key can't be re-derived from
    them without the identifier, and verification never looks at them.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(pattern=r"^[A-Z2-7]+$")
    words: tuple[str, ...]
