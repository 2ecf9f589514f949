"""
Course service orchestrator.

Coordinates the course catalog, the hosted media lifecycle, the
course-user relationship lists (saved, enrolled, finished) and reviews.

Dependencies: micourses.boundary, micourses.core
System role: Course use case orchestration
"""

import logging
import uuid
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from micourses.application.services.user_service import user_to_dict
from micourses.boundary.db.base import utcnow
from micourses.boundary.db.CRUD.admin_crud import admin_crud
from micourses.boundary.db.CRUD.course_crud import course_crud
from micourses.boundary.db.CRUD.user_crud import user_crud
from micourses.boundary.db.models.course_model import CourseModel
from micourses.boundary.db.models.user_model import UserModel
from micourses.boundary.media.cloudinary_client import (
    CloudinaryMediaClient,
    MediaAsset,
    MediaDeletionReport,
)
from micourses.core import validation
from micourses.core.exceptions import AuthError, ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def course_to_dict(course: CourseModel) -> dict:
    return {
        "id": course.id,
        "course_name": course.course_name,
        "sector": course.sector,
        "duration": course.duration,
        "description": course.description,
        "cover_image": dict(course.cover_image or {}),
        "videos": list(course.videos or []),
        "admin_id": course.admin_id,
        "likes": list(course.likes or []),
        "reviews": list(course.reviews or []),
        "created_at": course.created_at,
        "updated_at": course.updated_at,
    }


def course_assets(course: CourseModel) -> list[MediaAsset]:
    """Every hosted asset a course references: cover image plus videos."""
    assets = []
    cover_id = (course.cover_image or {}).get("public_id")
    if cover_id:
        assets.append(MediaAsset(cover_id, "image"))
    for video in course.videos or []:
        if video.get("public_id"):
            assets.append(MediaAsset(video["public_id"], "video"))
    return assets


def _asset(data: dict) -> dict:
    return {"url": data["url"], "public_id": data["public_id"]}


def _add_ref(refs: list, course_id: str) -> list:
    """Set semantics keyed by course id; the original timestamp is kept."""
    if any(ref["course_id"] == course_id for ref in refs):
        return list(refs)
    return [*refs, {"course_id": course_id, "added_at": utcnow().isoformat()}]


def _remove_ref(refs: list, course_id: str) -> list:
    return [ref for ref in refs if ref["course_id"] != course_id]


def _add_member(members: list, member: str) -> list:
    return list(members) if member in members else [*members, member]


def _remove_member(members: list, member: str) -> list:
    return [m for m in members if m != member]


class CourseService:
    """Course service orchestrator."""

    def __init__(self, db: AsyncSession, media: CloudinaryMediaClient) -> None:
        """
        Initialize course service.

        Args:
            db: Async SQLAlchemy session
            media: Media host client for asset destruction
        """
        self.db = db
        self.media = media

    async def _get_course(self, course_id: str | UUID) -> CourseModel:
        course = await course_crud.get_by_id(self.db, validation.parse_id(course_id, field="courseId"))
        if course is None:
            raise NotFoundError("Course not found", entity="course", entity_id=str(course_id))
        return course

    async def _get_user(self, user_id: str | UUID) -> UserModel:
        user = await user_crud.get_by_id(self.db, validation.parse_id(user_id, field="userId"))
        if user is None:
            raise NotFoundError("User not found", entity="user", entity_id=str(user_id))
        return user

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    async def create_course(
        self,
        course_name: str,
        sector: str,
        duration: str,
        description: str,
        cover_image: dict,
        admin_id: str,
        videos: list[dict] | None = None,
    ) -> dict:
        """
        Create a course owned by an admin.

        Raises:
            ValidationError: If a required field is blank
            NotFoundError: If the owning admin does not exist
            ConflictError: If the course name is taken
        """
        course_name = validation.validate_required(course_name, "courseName")
        sector = validation.validate_required(sector, "sector")
        duration = validation.validate_required(duration, "duration")
        description = validation.validate_required(description, "description")
        owner_id = validation.parse_id(admin_id, field="adminId")

        if not await admin_crud.exists(self.db, owner_id):
            raise NotFoundError("Admin not found", entity="admin", entity_id=str(owner_id))
        if await course_crud.get_by_name(self.db, course_name) is not None:
            raise ConflictError("Course already exists", details={"field": "courseName"})

        try:
            course = await course_crud.create(
                self.db,
                course_name=course_name,
                sector=sector,
                duration=duration,
                description=description,
                cover_image=_asset(cover_image),
                videos=[_asset(v) for v in videos or []],
                admin_id=owner_id,
            )
        except IntegrityError as e:
            raise ConflictError("Course already exists") from e

        logger.info(
            "Course created",
            extra={"course_id": str(course.id), "course_name": course_name, "admin_id": str(owner_id)},
        )
        return course_to_dict(course)

    async def list_courses(self, sector: str | None = None, admin_id: str | None = None) -> list[dict]:
        """
        List courses, newest first, optionally filtered by sector or owner.

        Raises:
            NotFoundError: If nothing matches
        """
        owner_id = validation.parse_id(admin_id, field="adminId") if admin_id is not None else None
        courses = await course_crud.get_filtered(self.db, sector=sector, admin_id=owner_id)
        if not courses:
            raise NotFoundError("No courses found", entity="course")
        return [course_to_dict(c) for c in courses]

    async def get_course(self, course_id: str) -> dict:
        return course_to_dict(await self._get_course(course_id))

    async def update_course(self, course_id: str, **fields) -> dict:
        """
        Partially update a course.

        The previous cover asset is destroyed only when the cover's public id
        changes; previous videos are destroyed only when they are dropped
        from the new list. Destruction happens after the record is updated.

        Args:
            course_id: Course UUID
            **fields: course_name, sector, duration, description,
                cover_image (dict), videos (list of dicts); None means unchanged

        Returns:
            dict: {"course": course dict, "media": MediaDeletionReport}

        Raises:
            ValidationError: If no field is given or a given field is blank
            NotFoundError: If the course does not exist
            ConflictError: If the new name belongs to another course
        """
        course = await self._get_course(course_id)

        updates: dict = {}
        for name in ("course_name", "sector", "duration", "description"):
            if fields.get(name) is not None:
                updates[name] = validation.validate_required(fields[name], name)
        if fields.get("cover_image") is not None:
            updates["cover_image"] = _asset(fields["cover_image"])
        if fields.get("videos") is not None:
            updates["videos"] = [_asset(v) for v in fields["videos"]]
        if not updates:
            raise ValidationError("At least one field must be provided for update")

        if "course_name" in updates and updates["course_name"] != course.course_name:
            if await course_crud.get_by_name(self.db, updates["course_name"]) is not None:
                raise ConflictError("Course already exists", details={"field": "courseName"})

        stale: list[MediaAsset] = []
        if "cover_image" in updates:
            old_cover = (course.cover_image or {}).get("public_id")
            if old_cover and old_cover != updates["cover_image"]["public_id"]:
                stale.append(MediaAsset(old_cover, "image"))
        if "videos" in updates:
            kept = {v["public_id"] for v in updates["videos"]}
            stale.extend(
                MediaAsset(v["public_id"], "video")
                for v in course.videos or []
                if v.get("public_id") and v["public_id"] not in kept
            )

        try:
            course = await course_crud.update(self.db, course, **updates)
        except IntegrityError as e:
            raise ConflictError("Course already exists") from e

        report = await self.media.destroy_many(stale) if stale else MediaDeletionReport()
        logger.info(
            "Course updated",
            extra={
                "course_id": str(course.id),
                "updates": list(updates.keys()),
                "stale_assets": len(stale),
            },
        )
        return {"course": course_to_dict(course), "media": report}

    async def delete_course(self, course_id: str) -> MediaDeletionReport:
        """
        Destroy a course's hosted media, then delete the course record.

        Raises:
            NotFoundError: If the course does not exist
        """
        course = await self._get_course(course_id)
        report = await self.media.destroy_many(course_assets(course))
        await course_crud.delete_by_id(self.db, course.id)
        logger.info(
            "Course deleted",
            extra={"course_id": str(course.id), "media_failures": len(report.failed)},
        )
        return report

    # ------------------------------------------------------------------
    # Course-user relationship
    # ------------------------------------------------------------------

    async def save_course(self, user_id: str, course_id: str) -> dict:
        """Add to the user's saved list and the course's likes."""
        user = await self._get_user(user_id)
        course = await self._get_course(course_id)

        await user_crud.update(
            self.db, user, saved_courses=_add_ref(user.saved_courses or [], str(course.id))
        )
        await course_crud.update(
            self.db, course, likes=_add_member(course.likes or [], str(user.id))
        )
        return {"message": f"Saved {course.course_name}", "user": user_to_dict(user)}

    async def unsave_course(self, user_id: str, course_id: str) -> dict:
        """Remove from the user's saved list and the course's likes."""
        user = await self._get_user(user_id)
        course = await self._get_course(course_id)

        await user_crud.update(
            self.db, user, saved_courses=_remove_ref(user.saved_courses or [], str(course.id))
        )
        await course_crud.update(
            self.db, course, likes=_remove_member(course.likes or [], str(user.id))
        )
        return {"message": f"Removed {course.course_name} from saved courses", "user": user_to_dict(user)}

    async def enroll_course(self, user_id: str, course_id: str) -> dict:
        user = await self._get_user(user_id)
        course = await self._get_course(course_id)

        await user_crud.update(
            self.db, user, enrolled_courses=_add_ref(user.enrolled_courses or [], str(course.id))
        )
        logger.info("User enrolled", extra={"user_id": str(user.id), "course_id": str(course.id)})
        return {"message": f"Enrolled in {course.course_name}", "user": user_to_dict(user)}

    async def finish_course(self, user_id: str, course_id: str) -> dict:
        """
        Record a finished course; the enrollment is kept.

        Raises:
            ValidationError: If the user is not enrolled in the course
        """
        user = await self._get_user(user_id)
        course = await self._get_course(course_id)

        if not any(ref["course_id"] == str(course.id) for ref in user.enrolled_courses or []):
            raise ValidationError("User is not enrolled in this course", field="courseId")

        await user_crud.update(
            self.db, user, finished_courses=_add_ref(user.finished_courses or [], str(course.id))
        )
        return {"message": f"Finished {course.course_name}", "user": user_to_dict(user)}

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------

    @staticmethod
    def _find_review(course: CourseModel, review_id: str) -> dict:
        review_key = str(validation.parse_id(review_id, field="reviewId"))
        for review in course.reviews or []:
            if review["id"] == review_key:
                return review
        raise NotFoundError("Review not found", entity="review", entity_id=review_key)

    async def _replace_review(self, course: CourseModel, updated: dict) -> None:
        reviews = [updated if r["id"] == updated["id"] else r for r in course.reviews or []]
        await course_crud.update(self.db, course, reviews=reviews)

    async def add_review(self, course_id: str, user_id: str, content: str) -> dict:
        course = await self._get_course(course_id)
        user = await self._get_user(user_id)
        content = validation.validate_required(content, "content")

        review = {
            "id": str(uuid.uuid4()),
            "user_id": str(user.id),
            "content": content,
            "created_at": utcnow().isoformat(),
            "likes": [],
            "unlikes": [],
        }
        await course_crud.update(self.db, course, reviews=[*(course.reviews or []), review])
        logger.info("Review added", extra={"course_id": str(course.id), "review_id": review["id"]})
        return review

    async def like_review(self, course_id: str, review_id: str, user_id: str) -> dict:
        """A like replaces any unlike by the same user."""
        course = await self._get_course(course_id)
        member = str(validation.parse_id(user_id, field="userId"))
        review = self._find_review(course, review_id)

        updated = {
            **review,
            "likes": _add_member(review["likes"], member),
            "unlikes": _remove_member(review["unlikes"], member),
        }
        await self._replace_review(course, updated)
        return updated

    async def unlike_review(self, course_id: str, review_id: str, user_id: str) -> dict:
        """An unlike replaces any like by the same user."""
        course = await self._get_course(course_id)
        member = str(validation.parse_id(user_id, field="userId"))
        review = self._find_review(course, review_id)

        updated = {
            **review,
            "likes": _remove_member(review["likes"], member),
            "unlikes": _add_member(review["unlikes"], member),
        }
        await self._replace_review(course, updated)
        return updated

    async def delete_review(self, course_id: str, review_id: str, user_id: str) -> None:
        """
        Remove a review.

        Raises:
            AuthError: If the caller is not the review's author
        """
        course = await self._get_course(course_id)
        review = self._find_review(course, review_id)
        if review["user_id"] != str(validation.parse_id(user_id, field="userId")):
            raise AuthError("Only the author can delete a review")

        await course_crud.update(
            self.db,
            course,
            reviews=[r for r in course.reviews or [] if r["id"] != review["id"]],
        )
        logger.info("Review deleted", extra={"course_id": str(course.id), "review_id": review["id"]})
