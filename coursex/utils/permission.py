from coursex.core.constants import RoleEnum
from coursex.core.exceptions import ForbiddenError
from coursex.models.course import Course
from coursex.models.user import User


class PermissionHelper:
    @staticmethod
    def is_instructor(user: User) -> bool:
        return user.role == RoleEnum.INSTRUCTOR

    @staticmethod
    def is_instructor_of_course(user: User, course: Course) -> bool:
        return course.instructor_id == user.id

    @staticmethod
    def can_manage_course(user: User, course: Course) -> bool:
        return PermissionHelper.is_instructor(user) and PermissionHelper.is_instructor_of_course(user, course)

    @staticmethod
    def require_instructor(user: User, error_message: str = "Only instructors can perform this action."):
        if not PermissionHelper.is_instructor(user):
            raise ForbiddenError(error_message)

    @staticmethod
    def require_course_management_permission(user: User, course: Course):
        if not PermissionHelper.can_manage_course(user, course):
            raise ForbiddenError("You do not have permission to manage this course.")
