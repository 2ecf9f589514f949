"""Response payload builders shared by the router tests."""

from datetime import datetime, timezone
from uuid import uuid4


def admin_profile(**overrides) -> dict:
    profile = {
        "id": uuid4(),
        "names": "Jane Doe",
        "email": "jane@example.com",
        "contact": "0123456789",
        "profile_picture": None,
        "verified": False,
        "recovery_email": None,
        "recovery_email_verified": False,
        "joined_at": datetime.now(timezone.utc),
    }
    profile.update(overrides)
    return profile


def user_profile(**overrides) -> dict:
    profile = {
        "id": uuid4(),
        "email": "learner@example.com",
        "first_name": "Sam",
        "second_name": "Lee",
        "contact": None,
        "gender": None,
        "date_of_birth": None,
        "profile_picture": None,
        "verified": True,
        "enrolled_courses": [],
        "saved_courses": [],
        "finished_courses": [],
        "followers": [],
        "joined_at": datetime.now(timezone.utc),
    }
    profile.update(overrides)
    return profile


def course(**overrides) -> dict:
    now = datetime.now(timezone.utc)
    data = {
        "id": uuid4(),
        "course_name": "Intro to Python",
        "sector": "tech",
        "duration": "4 weeks",
        "description": "Learn the basics",
        "cover_image": {"url": "https://cdn/cover.jpg", "public_id": "cover"},
        "videos": [{"url": "https://cdn/v1.mp4", "public_id": "v1"}],
        "admin_id": uuid4(),
        "likes": [],
        "reviews": [],
        "created_at": now,
        "updated_at": now,
    }
    data.update(overrides)
    return data


def review(**overrides) -> dict:
    data = {
        "id": str(uuid4()),
        "user_id": str(uuid4()),
        "content": "Great!",
        "created_at": datetime.now(timezone.utc).isoformat(),
        "likes": [],
        "unlikes": [],
    }
    data.update(overrides)
    return data


def post(**overrides) -> dict:
    data = {
        "id": uuid4(),
        "content": "Hello",
        "likes": [],
        "user": {"id": uuid4(), "name": "Sam Lee"},
        "created_at": datetime.now(timezone.utc),
    }
    data.update(overrides)
    return data
