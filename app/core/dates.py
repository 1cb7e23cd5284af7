from datetime import datetime, timezone


def utcnow() -> datetime:
    """Текущий момент в UTC"""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Наивные даты (например, из SQLite) считаем заданными в UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
