# Import every model so Base.metadata is complete for create_all and Alembic.
from coursex.core.database import Base
from coursex.models.user import User
from coursex.models.course import Course
from coursex.models.lesson import Lesson, Resource
from coursex.models.enrollment import Enrollment
from coursex.models.lesson_progress import LessonProgress
from coursex.models.payment import Payment
from coursex.models.review import Review
from coursex.models.wishlist import WishlistItem
