import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock
from uuid import uuid4

from factories import course, review, user_profile
from micourses.api.deps.dependencies import get_course_service
from micourses.boundary.media.cloudinary_client import MediaDeletionReport
from micourses.core.exceptions import AuthError, NotFoundError, ValidationError
from micourses.main import create_app


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


@pytest.fixture
def mock_course_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_course_service] = lambda: service
    return service


CREATE_BODY = {
    "courseName": "Intro to Python",
    "sector": "tech",
    "duration": "4 weeks",
    "description": "Learn the basics",
    "coverImage": {"url": "https://cdn/cover.jpg", "publicId": "cover"},
    "videos": [{"url": "https://cdn/v1.mp4", "publicId": "v1"}],
    "adminId": str(uuid4()),
}


def test_create_course(client, mock_course_service):
    created = course()
    mock_course_service.create_course.return_value = created

    response = client.post("/create-course", json=CREATE_BODY)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["courseName"] == "Intro to Python"
    assert data["coverImage"] == {"url": "https://cdn/cover.jpg", "publicId": "cover"}
    kwargs = mock_course_service.create_course.call_args.kwargs
    assert kwargs["cover_image"] == {"url": "https://cdn/cover.jpg", "public_id": "cover"}
    assert kwargs["videos"] == [{"url": "https://cdn/v1.mp4", "public_id": "v1"}]


def test_create_course_incomplete_asset(client, mock_course_service):
    body = {**CREATE_BODY, "coverImage": {"url": "https://cdn/cover.jpg", "publicId": " "}}

    response = client.post("/create-course", json=body)

    assert response.status_code == 400
    mock_course_service.create_course.assert_not_called()


def test_list_courses_with_filters(client, mock_course_service):
    mock_course_service.list_courses.return_value = [course(), course(course_name="Other")]

    response = client.get("/courses", params={"sector": "tech", "adminId": "abc"})

    assert response.status_code == 200
    assert len(response.json()) == 2
    mock_course_service.list_courses.assert_awaited_once_with(sector="tech", admin_id="abc")


def test_category_with_no_courses_is_404(client, mock_course_service):
    mock_course_service.list_courses.side_effect = NotFoundError("No courses found")

    response = client.get("/course/underwater")

    assert response.status_code == 404
    assert response.json() == {"message": "No courses found"}
    mock_course_service.list_courses.assert_awaited_once_with(sector="underwater")


def test_course_details(client, mock_course_service):
    found = course()
    mock_course_service.get_course.return_value = found

    response = client.get(f"/course-details/{found['id']}")

    assert response.status_code == 200
    assert response.json()["data"]["id"] == str(found["id"])


def test_update_course_reports_media(client, mock_course_service):
    mock_course_service.update_course.return_value = {
        "course": course(duration="6 weeks"),
        "media": MediaDeletionReport(deleted=["old-cover"]),
    }

    response = client.patch(
        "/update-course/abc",
        json={"duration": "6 weeks", "coverImage": {"url": "https://cdn/n.jpg", "publicId": "new"}},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["data"]["duration"] == "6 weeks"
    assert body["media"] == {"deleted": ["old-cover"], "failed": []}
    kwargs = mock_course_service.update_course.call_args.kwargs
    assert kwargs["cover_image"] == {"url": "https://cdn/n.jpg", "public_id": "new"}
    assert kwargs["videos"] is None
    assert kwargs["course_name"] is None


def test_update_course_empty_body(client, mock_course_service):
    response = client.patch("/update-course/abc", json={})

    assert response.status_code == 400
    assert response.json() == {"message": "At least one field must be provided for update"}


def test_delete_course(client, mock_course_service):
    mock_course_service.delete_course.return_value = MediaDeletionReport(
        deleted=["cover"], failed=[{"publicId": "v1", "error": "timeout"}]
    )

    response = client.delete("/delete-course/abc")

    assert response.status_code == 200
    assert response.json()["media"]["failed"] == [{"publicId": "v1", "error": "timeout"}]


@pytest.mark.parametrize("action", ["save", "unsave", "enroll", "finish"])
def test_course_user_relationship(client, mock_course_service, action):
    method = getattr(mock_course_service, f"{action}_course")
    method.return_value = {"message": "Enrolled in Intro to Python", "user": user_profile()}

    response = client.put(f"/course/{action}", json={"userId": "u1", "courseId": "c1"})

    assert response.status_code == 200
    assert response.json()["message"] == "Enrolled in Intro to Python"
    method.assert_awaited_once_with("u1", "c1")


def test_finish_without_enrollment(client, mock_course_service):
    mock_course_service.finish_course.side_effect = ValidationError("User is not enrolled in this course")

    response = client.put("/course/finish", json={"userId": "u1", "courseId": "c1"})

    assert response.status_code == 400


def test_add_review(client, mock_course_service):
    mock_course_service.add_review.return_value = review(content="Loved it")

    response = client.post("/course/c1/reviews", json={"userId": "u1", "content": "Loved it"})

    assert response.status_code == 201
    assert response.json()["data"]["content"] == "Loved it"
    mock_course_service.add_review.assert_awaited_once_with("c1", "u1", "Loved it")


def test_like_and_unlike_review(client, mock_course_service):
    voter = str(uuid4())
    mock_course_service.like_review.return_value = review(likes=[voter])
    mock_course_service.unlike_review.return_value = review(unlikes=[voter])

    liked = client.put(f"/course/c1/reviews/r1/{voter}/like")
    unliked = client.put(f"/course/c1/reviews/r1/{voter}/unlike")

    assert liked.json()["data"]["likes"] == [voter]
    assert unliked.json()["data"]["unlikes"] == [voter]


def test_delete_review_by_non_author(client, mock_course_service):
    mock_course_service.delete_review.side_effect = AuthError("Only the author can delete a review")

    response = client.request("DELETE", "/course/c1/reviews/r1", json={"userId": "u2"})

    assert response.status_code == 401
    assert response.json() == {"message": "Only the author can delete a review"}
    mock_course_service.delete_review.assert_awaited_once_with("c1", "r1", "u2")
