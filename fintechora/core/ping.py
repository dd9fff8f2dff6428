"""Ping utility used by the API health-check."""

SERVICE_NAME = "fintechora"


def get_ping_message() -> str:
    return "pong"
