from collections import defaultdict

from sqlalchemy.orm import Session

from coursex.core.config import settings
from coursex.core.constants import RECENT_SALES_LIMIT
from coursex.crud.payment import payment as crud_payment
from coursex.models.user import User
from coursex.schemas.revenue import CourseRevenue, RevenueReport, Sale
from coursex.utils.money import round_money, split_amount
from coursex.utils.permission import PermissionHelper as permission_helper


class RevenueService:

    def get_instructor_revenue(self, db: Session, current_user: User) -> RevenueReport:
        permission_helper.require_instructor(current_user)

        # Newest first
        payments = crud_payment.get_completed_for_instructor(db, instructor_id=current_user.id)
        fee_percent = settings.PLATFORM_FEE_PERCENT

        per_course = defaultdict(lambda: {"title": "", "sales": 0, "revenue": 0.0, "platform_fee": 0.0, "earnings": 0.0})
        sales = []
        for payment in payments:
            platform_fee, earnings = split_amount(payment.amount, fee_percent)
            row = per_course[payment.course_id]
            row["title"] = payment.course.title
            row["sales"] += 1
            row["revenue"] += payment.amount
            row["platform_fee"] += platform_fee
            row["earnings"] += earnings
            sales.append(Sale(
                payment_id=payment.id,
                course_id=payment.course_id,
                course_title=payment.course.title,
                amount=payment.amount,
                platform_fee=platform_fee,
                earnings=earnings,
                created_at=payment.created_at
            ))

        courses = [
            CourseRevenue(
                course_id=course_id,
                title=row["title"],
                sales=row["sales"],
                revenue=round_money(row["revenue"]),
                platform_fee=round_money(row["platform_fee"]),
                earnings=round_money(row["earnings"])
            )
            for course_id, row in per_course.items()
        ]
        courses.sort(key=lambda c: c.revenue, reverse=True)

        return RevenueReport(
            total_revenue=round_money(sum(s.amount for s in sales)),
            total_platform_fee=round_money(sum(s.platform_fee for s in sales)),
            total_earnings=round_money(sum(s.earnings for s in sales)),
            total_sales=len(sales),
            courses=courses,
            recent_sales=sales[:RECENT_SALES_LIMIT]
        )


revenue_service = RevenueService()
