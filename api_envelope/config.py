from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Pagination window used when a client sends no (or a non-positive) limit
    default_limit: int = Field(10, ge=1)
    # Upper bound for any client-supplied limit
    max_limit: int = Field(100, ge=1)

    model_config = {"env_prefix": "API_ENVELOPE_", "env_file": ".env", "extra": "ignore"}

    @model_validator(mode="after")
    def check_limits(self) -> "Settings":
        if self.default_limit > self.max_limit:
            raise ValueError(
                f"default_limit ({self.default_limit}) cannot exceed max_limit ({self.max_limit})"
            )
        return self


settings = Settings()
