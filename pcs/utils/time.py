from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

TZ_BANGKOK = ZoneInfo("Asia/Bangkok")

def format_stamp(now: Optional[datetime] = None, tz: ZoneInfo = TZ_BANGKOK) -> str:
    """
    Render `now` (default: current time) in `tz`, UnixDate layout with a
    space-padded day, e.g. "Sun Jan 19 01:50:38 +07 2025", "Sun Jan  5 ...".
    """
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=tz)
    now = now.astimezone(tz)
    return f"{now:%a %b} {now.day:2d} {now:%H:%M:%S %Z %Y}"
