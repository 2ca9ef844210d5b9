import uuid
from datetime import datetime, timezone


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # В БД храним наивное UTC-время
    return datetime.now(timezone.utc).replace(tzinfo=None)
