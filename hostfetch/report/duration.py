"""Human-readable uptime strings."""


def format_uptime(seconds: int) -> str:
    """Return a compact uptime such as ``"1d 2h 3m"``, ``"4h 5m"`` or ``"6m"``.

    The seconds component is dropped. Minutes are always shown, so anything
    under a minute renders as ``"0m"``.
    """
    days, remainder = divmod(int(seconds), 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes = remainder // 60

    if days > 0:
        return f"{days}d {hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"
