from __future__ import annotations


class AppError(Exception):
    """Base app error."""


class DirectionsRequestError(AppError):
    """Raised when a directions provider cannot produce a route list."""


class TransportError(DirectionsRequestError):
    """Provider unreachable, timed out, or answered with a non-success status."""


class ParseError(DirectionsRequestError):
    """Provider answered, but the payload does not have the route shape."""


class LocationValidationError(AppError):
    """Start or destination is empty."""


class RouteSelectionError(AppError):
    """Selected route is not part of the currently loaded route list."""


class ProviderNotRegisteredError(AppError):
    """No directions provider is registered under the requested name."""
