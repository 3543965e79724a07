"""
Error taxonomy for the tracker.

Everything upstream of the Telegram hop is fatal and propagates to the
top-level handler in :mod:`hubez_tracker.core`. Only ``DeliveryError`` is
caught and logged (by the notification worker).
"""

import click


class TrackerError(Exception):
    """Base class for tracker errors."""


class UsageError(TrackerError, click.UsageError):
    """Bad command-line usage."""

    def __init__(self, message: str, ctx=None):
        click.UsageError.__init__(self, message, ctx)


class ConfigError(TrackerError):
    """A required setting is missing or invalid."""


class UrlError(TrackerError):
    """The tracking URL could not be built."""


class TransportError(TrackerError):
    """Network failure talking to the tracking endpoint."""


class MalformedResponse(TrackerError):
    """The tracking response could not be parsed or has the wrong shape."""


class DeliveryError(TrackerError):
    """The messaging transport failed to deliver a message."""


class ChannelClosedError(TrackerError):
    """The delivery channel is closed."""
