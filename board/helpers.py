"""Small shared helpers."""

import time


def epoch_now() -> int:
    """Current time as epoch seconds."""
    return int(time.time())


def normalize_ip(ip: str | None) -> str:
    """Collapse loopback/IPv4-mapped forms to a plain IPv4 address."""
    if not ip:
        return ""
    if ip == "::1":
        return "127.0.0.1"
    if ip.startswith("::ffff:"):
        return ip[len("::ffff:"):]
    return ip
