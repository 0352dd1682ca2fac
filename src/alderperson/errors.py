from __future__ import annotations


class AlderpersonError(Exception):
    """Base class for lookup specific exceptions."""


class UpstreamUnavailable(AlderpersonError):
    """Raised for browser or session faults while driving the ward lookup form."""


class NavigationTimeout(UpstreamUnavailable):
    """Raised when the ward lookup page does not finish loading in time."""


class ElementNotFound(UpstreamUnavailable):
    """Raised when the address input cannot be located on the lookup page."""


class WardNotFound(AlderpersonError):
    """Raised when a lookup completes without a usable ward."""


class EnrichmentError(AlderpersonError):
    """Raised when the open data portal request fails."""


class NoAlderpersonData(WardNotFound):
    """Raised when a resolved ward has neither an open data record nor a scraped name."""
