from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from coursex.core.config import settings
from coursex.core.exceptions import DomainException
from coursex.core.logging import configure_logging
from coursex.endpoints import admin, certificates, courses, enrollments, instructor, lessons, payments, reviews, users, wishlist
from coursex.middleware.exceptions import (
    domain_exception_handler,
    global_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from coursex.middleware.logging import RequestLoggingMiddleware

configure_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(DomainException, domain_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

api = settings.API_PREFIX

app.include_router(users.router, prefix=f"{api}/users", tags=["Users"])
app.include_router(admin.router, prefix=f"{api}/admin", tags=["Admin"])
app.include_router(courses.router, prefix=f"{api}/courses", tags=["Courses"])
app.include_router(instructor.router, prefix=f"{api}/instructor", tags=["Instructor"])
app.include_router(enrollments.router, prefix=f"{api}/enrollments", tags=["Enrollments"])
app.include_router(lessons.router, prefix=f"{api}/lessons", tags=["Lessons"])
app.include_router(payments.router, prefix=f"{api}/payments", tags=["Payments"])
app.include_router(wishlist.router, prefix=f"{api}/wishlist", tags=["Wishlist"])
app.include_router(reviews.router, prefix=f"{api}/reviews", tags=["Reviews"])
app.include_router(certificates.router, prefix=f"{api}/certificates", tags=["Certificates"])


@app.get(f"{api}/health", tags=["Health"])
def health_check():
    return {"status": "ok", "version": settings.VERSION}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
