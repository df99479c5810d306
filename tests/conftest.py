import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

import main
from coursex.core.config import settings
from coursex.core.constants import RoleEnum
from coursex.core.database import get_db
from coursex.models.base import Base
from coursex.utils import deps as deps_utils
from tests.helpers.factories import auth_headers, make_user
from tests.helpers.gateway import FakePaymentGateway

test_db_url = settings.TEST_DATABASE_URL or "sqlite://"

@pytest.fixture(scope="session")
def database_engine():
    if test_db_url.startswith("sqlite"):
        engine = create_engine(
            test_db_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )
    else:
        engine = create_engine(test_db_url)
    yield engine
    engine.dispose()

@pytest.fixture(scope="function")
def db_session(database_engine):
    Base.metadata.create_all(bind=database_engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=database_engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()
        Base.metadata.drop_all(bind=database_engine)

@pytest.fixture(scope="function")
def payment_gateway():
    return FakePaymentGateway()

@pytest.fixture(scope="function")
def client(db_session, payment_gateway):
    # Re-initialize the app for each test function to ensure a clean state
    from importlib import reload
    reload(main)

    def _transactional_db():
        try:
            yield db_session
            db_session.commit()
        except Exception:
            db_session.rollback()
            raise

    main.app.dependency_overrides[get_db] = lambda: db_session
    main.app.dependency_overrides[deps_utils.get_db] = lambda: db_session
    main.app.dependency_overrides[deps_utils.get_transactional_db] = _transactional_db
    main.app.dependency_overrides[deps_utils.get_payment_gateway] = lambda: payment_gateway
    with TestClient(main.app) as test_client:
        yield test_client

@pytest.fixture
def instructor(db_session):
    return make_user(db_session, role=RoleEnum.INSTRUCTOR, name="Ada Instructor")

@pytest.fixture
def student(db_session):
    return make_user(db_session, role=RoleEnum.STUDENT, name="Sam Student")

@pytest.fixture
def admin(db_session):
    return make_user(db_session, role=RoleEnum.ADMIN, name="Alex Admin")

@pytest.fixture
def instructor_headers(instructor):
    return auth_headers(instructor)

@pytest.fixture
def student_headers(student):
    return auth_headers(student)

@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)
