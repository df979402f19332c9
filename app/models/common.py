from datetime import datetime, timezone
from uuid import uuid4

def new_id() -> str:
    return uuid4().hex

def utcnow() -> datetime:
    # Siempre con tzinfo: SQLModel reciente rechaza datetimes naive
    return datetime.now(timezone.utc)
