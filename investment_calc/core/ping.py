"""Health-check payload for the API."""

from investment_calc import __version__


def get_ping_message() -> str:
    return "pong"


def get_service_version() -> str:
    return __version__
