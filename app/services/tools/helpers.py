import random
from datetime import datetime, timezone
from typing import Optional

# Company logos served by the frontend under /covers
INTERVIEW_COVERS = (
    "/adobe.png",
    "/amazon.png",
    "/facebook.png",
    "/hostinger.png",
    "/pinterest.png",
    "/quora.png",
    "/reddit.png",
    "/skype.png",
    "/spotify.png",
    "/telegram.png",
    "/tiktok.png",
    "/yahoo.png",
)


def get_random_interview_cover(rng: Optional[random.Random] = None) -> str:
    """Pick a cover image path for a new interview."""
    chooser = rng or random
    return f"/covers{chooser.choice(INTERVIEW_COVERS)}"


def utc_now_iso() -> str:
    """Current time as an ISO-8601 string with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
