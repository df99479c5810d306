import uuid
from typing import Any, Dict, List, Optional

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from coursex.core.constants import RoleEnum
from coursex.core.security import create_identity_token
from coursex.models.user import User


def make_user(db: Session, role: RoleEnum = RoleEnum.STUDENT, email: Optional[str] = None, name: Optional[str] = None) -> User:
    """Insert an already-mirrored user."""
    suffix = uuid.uuid4().hex[:8]
    user = User(
        id=f"user_{suffix}",
        email=email or f"{role.value.lower()}-{suffix}@test.com",
        name=name,
        role=role
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user: User) -> Dict[str, str]:
    token = create_identity_token(user.id, email=user.email, name=user.name)
    return {"Authorization": f"Bearer {token}"}


def lesson_payload(index: int, resources: Optional[List[str]] = None, **extra) -> Dict[str, Any]:
    payload = {
        "title": f"Lesson {index}",
        "description": f"Lesson {index} description",
        "video_url": f"https://videos.test/{index}.mp4",
        "order": index,
        "resources": resources or [],
    }
    payload.update(extra)
    return payload


def course_payload(title: Optional[str] = None, price: float = 0, lessons: int = 0) -> Dict[str, Any]:
    return {
        "title": title or f"Course {uuid.uuid4().hex[:6]}",
        "description": "Learn things",
        "category": "programming",
        "thumbnail_url": "https://images.test/thumb.png",
        "price": price,
        "lessons": [lesson_payload(i + 1) for i in range(lessons)],
    }


def create_course(
    client: TestClient,
    headers: Dict[str, str],
    *,
    title: Optional[str] = None,
    price: float = 0,
    lessons: int = 0,
    publish: bool = True
) -> Dict[str, Any]:
    response = client.post("/api/courses", headers=headers, json=course_payload(title, price, lessons))
    assert response.status_code == 201, response.text
    course = response.json()["data"]
    if publish:
        response = client.put(f"/api/courses/{course['id']}", headers=headers, json={"published": True})
        assert response.status_code == 200, response.text
        course = response.json()["data"]
    return course


def enroll(client: TestClient, headers: Dict[str, str], course_id: int):
    return client.post("/api/enrollments", headers=headers, json={"course_id": course_id})


def purchase(client: TestClient, headers: Dict[str, str], course_id: int) -> Dict[str, Any]:
    """Create and confirm a payment intent, returning the confirmation data."""
    intent = client.post("/api/payments/create-intent", headers=headers, json={"course_id": course_id})
    assert intent.status_code == 200, intent.text
    intent_data = intent.json()["data"]
    confirm = client.post(
        "/api/payments/confirm",
        headers=headers,
        json={"payment_intent_id": intent_data["payment_intent_id"], "payment_id": intent_data["payment_id"]}
    )
    assert confirm.status_code == 200, confirm.text
    return confirm.json()["data"]
