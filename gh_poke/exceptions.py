"""Error taxonomy for gh-poke."""


class PokeError(Exception):
    """Base class for all gh-poke errors."""


class ConfigError(PokeError, ValueError):
    """Required configuration is missing or invalid."""


class TransportError(PokeError):
    """A remote API call returned a non-success response.

    Attributes:
        status_code: HTTP status reported by the remote service, if any
        body: Response body or error payload, as text
    """

    def __init__(self, status_code: int | None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"GitHub API error: {status_code} - {body}")


class NoOrganizationError(PokeError):
    """No organization was given and none is configured."""

    def __init__(self) -> None:
        super().__init__("No organization specified and no default in WORK_ORGS")


class MalformedKeyError(PokeError, ValueError):
    """An issue key does not have the form ``owner/repo#number``."""


class InvalidStatusError(PokeError, ValueError):
    """A to-do status value is not one of the known statuses."""


class StorageReadError(PokeError):
    """The persisted to-do state could not be read or decoded."""


class StorageWriteError(PokeError):
    """The persisted to-do state could not be written."""
