"""Custom exception hierarchy for holidaycal.

Core calendar operations never raise on malformed holiday data; these
exceptions cover the edges of the application (configuration files, the
holiday data file and renderer selection).
"""


class HolidayCalError(Exception):
    """Base exception for all holidaycal errors."""


class ConfigurationError(HolidayCalError):
    """Configuration could not be loaded.

    Raised when:
    - The config file cannot be read
    - The config file is not valid YAML
    - The top level of the config file is not a mapping
    """


class DataSourceError(HolidayCalError):
    """Holiday data snapshot could not be parsed.

    A missing data file is not an error (it degrades to "no holidays"); a file
    that exists but is neither JSON nor YAML is.
    """

    def __init__(self, message: str, path: str) -> None:
        """Initialize DataSourceError.

        Args:
            message: Error message
            path: Path of the offending data file
        """
        super().__init__(message)
        self.path = path


class RendererNotFoundError(HolidayCalError):
    """Requested output renderer is not registered."""

    def __init__(self, renderer_type: str) -> None:
        super().__init__(f"Unknown renderer type: {renderer_type!r}")
        self.renderer_type = renderer_type
