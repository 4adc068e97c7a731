from datetime import datetime, timezone


def reset_time_str(epoch_seconds: str | int) -> str:
    """X-RateLimit-Reset (epoch en segundos) -> 'HH:MM:SS UTC'."""
    dt = datetime.fromtimestamp(int(epoch_seconds), tz=timezone.utc)
    return dt.strftime("%H:%M:%S UTC")
