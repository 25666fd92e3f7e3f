"""Block Kit builder configuration settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class Settings(InfrastructureSettings):
    """Block Kit builder configuration settings.

    The builders themselves are configuration-free; these settings only
    drive ambient behavior such as log level and renderer selection.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from infrastructure.configuration import settings

        if settings.is_production:
            # JSON log output...
        ```
    """

    PREFIX: str = Field(
        default="",
        alias="PREFIX",
        description="Environment prefix for non-production deployments",
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)


# Create the singleton settings instance
settings = Settings()
