from sqlalchemy.orm import Session

from coursex.crud.course import course as crud_course
from coursex.crud.enrollment import enrollment as crud_enrollment
from coursex.crud.payment import payment as crud_payment
from coursex.crud.user import user as crud_user
from coursex.schemas.admin import AdminStats
from coursex.utils.money import round_money


class AdminService:

    def get_stats(self, db: Session) -> AdminStats:
        return AdminStats(
            total_users=crud_user.count(db),
            total_courses=crud_course.count(db),
            total_enrollments=crud_enrollment.count(db),
            total_revenue=round_money(crud_payment.total_completed_amount(db))
        )


admin_service = AdminService()
