"""API server configuration models."""

from pydantic import BaseModel, Field, field_validator


class AuthConfig(BaseModel):
    """Caller resolution from JWT bearer tokens."""

    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    jwt_secret_env: str = Field(
        default="MISSIVE_JWT_SECRET",
        description="Environment variable holding the JWT secret",
    )
    identity_claim: str = Field(
        default="sub",
        description="Token claim used as the caller identity",
    )


class APIConfig(BaseModel):
    """Configuration for the HTTP API server."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Port number")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True,
        description="Allow credentials in CORS",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v
