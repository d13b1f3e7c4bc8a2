"""Error taxonomy for a single fetch cycle.

Every error here is terminal for the cycle that raised it and carries a
message short enough to show in place of the current-conditions panel.
"""


class WidgetError(Exception):
    """Base class for errors surfaced to the user."""


class NotFoundError(WidgetError):
    """Geocoding returned no match for the query."""


class NetworkError(WidgetError):
    """Transport failure or error status from an upstream API."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(WidgetError):
    """Upstream response body could not be decoded into the data model."""


class AlignmentError(WidgetError):
    """Hourly series has no sample for the current local hour."""
