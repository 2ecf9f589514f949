"""
Course API endpoints.

Routes:
- POST /create-course - Create course
- GET /courses - List courses (optional sector and adminId filters)
- GET /course/{category} - List courses in a sector
- GET /course-details/{course_id} - Get single course
- PATCH /update-course/{course_id} - Update course
- DELETE /delete-course/{course_id} - Delete course and its media
- PUT /course/save, /course/unsave, /course/enroll, /course/finish - Course-user relationship
- POST /course/{course_id}/reviews - Add review
- PUT /course/{course_id}/reviews/{review_id}/{user_id}/like - Like review
- PUT /course/{course_id}/reviews/{review_id}/{user_id}/unlike - Unlike review
- DELETE /course/{course_id}/reviews/{review_id} - Delete review (author only)

Dependencies: micourses.application.services, micourses.models
System role: Course management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from micourses.api.deps.dependencies import get_course_service
from micourses.api.routers.router_utils import handle_api_errors
from micourses.application.services.course_service import CourseService
from micourses.models.common import MessageResponse
from micourses.models.course import (
    CourseEnvelope,
    CourseResponse,
    CourseUpdateResponse,
    CourseUserRequest,
    CourseUserResponse,
    CreateCourseRequest,
    CreateReviewRequest,
    DeleteCourseResponse,
    DeleteReviewRequest,
    ReviewEnvelope,
    UpdateCourseRequest,
)

from .course_responses import (
    map_course_to_response,
    map_courses_to_response,
    map_media_report,
    map_review_to_response,
    map_user_to_response,
)
from .course_validators import validate_course_creation, validate_course_update

logger = logging.getLogger(__name__)

router = APIRouter(tags=["courses"])


@router.post("/create-course", response_model=CourseEnvelope, status_code=201)
@handle_api_errors
async def create_course(
    request: CreateCourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseEnvelope:
    """
    Create a course owned by an admin.

    Args:
        request: CreateCourseRequest with catalog fields and hosted assets
        course_service: Injected CourseService

    Returns:
        CourseEnvelope: Created course

    Raises:
        HTTPException(400): Invalid request
        HTTPException(404): Owning admin not found
        HTTPException(409): Course name taken
    """
    # Business validation
    validate_course_creation(request)

    logger.info(
        "Creating new course",
        extra={"course_name": request.course_name, "video_count": len(request.videos)},
    )

    course = await course_service.create_course(
        course_name=request.course_name,
        sector=request.sector,
        duration=request.duration,
        description=request.description,
        cover_image=request.cover_image.model_dump(),
        admin_id=request.admin_id,
        videos=[v.model_dump() for v in request.videos],
    )
    return CourseEnvelope(message="Course created", data=map_course_to_response(course))


@router.get("/courses", response_model=list[CourseResponse])
@handle_api_errors
async def list_courses(
    sector: str | None = None,
    admin_id: str | None = Query(None, alias="adminId"),
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    """
    List courses newest first.

    Raises:
        HTTPException(404): No course matches
    """
    courses = await course_service.list_courses(sector=sector, admin_id=admin_id)
    logger.info(
        "Courses retrieved",
        extra={"count": len(courses), "sector": sector, "admin_id": admin_id},
    )
    return map_courses_to_response(courses)


@router.get("/course/{category}", response_model=list[CourseResponse])
@handle_api_errors
async def list_courses_by_category(
    category: str,
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    courses = await course_service.list_courses(sector=category)
    return map_courses_to_response(courses)


@router.get("/course-details/{course_id}", response_model=CourseEnvelope)
@handle_api_errors
async def get_course(
    course_id: str,
    course_service: CourseService = Depends(get_course_service),
) -> CourseEnvelope:
    course = await course_service.get_course(course_id)
    return CourseEnvelope(message="Course found", data=map_course_to_response(course))


@router.patch("/update-course/{course_id}", response_model=CourseUpdateResponse)
@handle_api_errors
async def update_course(
    course_id: str,
    request: UpdateCourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseUpdateResponse:
    """
    Partially update a course.

    Replaced hosted assets are destroyed after the update; failures are
    reported in `media.failed`.

    Raises:
        HTTPException(400): Nothing to update or invalid field
        HTTPException(404): Course not found
        HTTPException(409): New name belongs to another course
    """
    validate_course_update(request)

    result = await course_service.update_course(
        course_id,
        course_name=request.course_name,
        sector=request.sector,
        duration=request.duration,
        description=request.description,
        cover_image=request.cover_image.model_dump() if request.cover_image else None,
        videos=[v.model_dump() for v in request.videos] if request.videos is not None else None,
    )
    return CourseUpdateResponse(
        message="Course updated",
        data=map_course_to_response(result["course"]),
        media=map_media_report(result["media"]),
    )


@router.delete("/delete-course/{course_id}", response_model=DeleteCourseResponse)
@handle_api_errors
async def delete_course(
    course_id: str,
    course_service: CourseService = Depends(get_course_service),
) -> DeleteCourseResponse:
    report = await course_service.delete_course(course_id)
    return DeleteCourseResponse(message="Course deleted", media=map_media_report(report))


@router.put("/course/save", response_model=CourseUserResponse)
@handle_api_errors
async def save_course(
    request: CourseUserRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseUserResponse:
    result = await course_service.save_course(request.user_id, request.course_id)
    return CourseUserResponse(message=result["message"], data=map_user_to_response(result["user"]))


@router.put("/course/unsave", response_model=CourseUserResponse)
@handle_api_errors
async def unsave_course(
    request: CourseUserRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseUserResponse:
    result = await course_service.unsave_course(request.user_id, request.course_id)
    return CourseUserResponse(message=result["message"], data=map_user_to_response(result["user"]))


@router.put("/course/enroll", response_model=CourseUserResponse)
@handle_api_errors
async def enroll_course(
    request: CourseUserRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseUserResponse:
    result = await course_service.enroll_course(request.user_id, request.course_id)
    return CourseUserResponse(message=result["message"], data=map_user_to_response(result["user"]))


@router.put("/course/finish", response_model=CourseUserResponse)
@handle_api_errors
async def finish_course(
    request: CourseUserRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseUserResponse:
    """
    Record a finished course.

    Raises:
        HTTPException(400): User is not enrolled in the course
    """
    result = await course_service.finish_course(request.user_id, request.course_id)
    return CourseUserResponse(message=result["message"], data=map_user_to_response(result["user"]))


@router.post("/course/{course_id}/reviews", response_model=ReviewEnvelope, status_code=201)
@handle_api_errors
async def add_review(
    course_id: str,
    request: CreateReviewRequest,
    course_service: CourseService = Depends(get_course_service),
) -> ReviewEnvelope:
    review = await course_service.add_review(course_id, request.user_id, request.content)
    return ReviewEnvelope(message="Review added", data=map_review_to_response(review))


@router.put(
    "/course/{course_id}/reviews/{review_id}/{user_id}/like",
    response_model=ReviewEnvelope,
)
@handle_api_errors
async def like_review(
    course_id: str,
    review_id: str,
    user_id: str,
    course_service: CourseService = Depends(get_course_service),
) -> ReviewEnvelope:
    review = await course_service.like_review(course_id, review_id, user_id)
    return ReviewEnvelope(message="Review liked", data=map_review_to_response(review))


@router.put(
    "/course/{course_id}/reviews/{review_id}/{user_id}/unlike",
    response_model=ReviewEnvelope,
)
@handle_api_errors
async def unlike_review(
    course_id: str,
    review_id: str,
    user_id: str,
    course_service: CourseService = Depends(get_course_service),
) -> ReviewEnvelope:
    review = await course_service.unlike_review(course_id, review_id, user_id)
    return ReviewEnvelope(message="Review unliked", data=map_review_to_response(review))


@router.delete("/course/{course_id}/reviews/{review_id}", response_model=MessageResponse)
@handle_api_errors
async def delete_review(
    course_id: str,
    review_id: str,
    request: DeleteReviewRequest,
    course_service: CourseService = Depends(get_course_service),
) -> MessageResponse:
    """
    Delete a review.

    Raises:
        HTTPException(401): Caller is not the review's author
        HTTPException(404): Course or review not found
    """
    await course_service.delete_review(course_id, review_id, request.user_id)
    return MessageResponse(message="Review deleted")
