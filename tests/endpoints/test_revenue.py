from coursex.core.config import settings
from coursex.core.constants import RoleEnum
from tests.helpers.asserts import assert_error
from tests.helpers.factories import auth_headers, create_course, make_user, purchase


def test_single_sale_split(client, instructor_headers, student_headers, monkeypatch):
    print("\n[TEST] Revenue split for one sale")
    monkeypatch.setattr(settings, "PLATFORM_FEE_PERCENT", 10.0)
    course = create_course(client, instructor_headers, title="Premium", price=49.99)
    purchase(client, student_headers, course["id"])

    response = client.get("/api/instructor/revenue", headers=instructor_headers)
    assert response.status_code == 200, response.text
    data = response.json()["data"]
    assert data["total_revenue"] == 49.99
    assert data["total_platform_fee"] == 5.0
    assert data["total_earnings"] == 44.99
    assert data["total_sales"] == 1
    assert data["courses"] == [{
        "course_id": course["id"],
        "title": "Premium",
        "sales": 1,
        "revenue": 49.99,
        "platform_fee": 5.0,
        "earnings": 44.99,
    }]
    assert data["recent_sales"][0]["amount"] == 49.99


def test_breakdown_sorted_and_limited_to_sold_courses(client, instructor_headers, db_session):
    cheap = create_course(client, instructor_headers, title="Cheap", price=5)
    pricey = create_course(client, instructor_headers, title="Pricey", price=40)
    create_course(client, instructor_headers, title="Unsold", price=15)

    buyers = [auth_headers(make_user(db_session)) for _ in range(3)]
    for headers in buyers:
        purchase(client, headers, cheap["id"])
    purchase(client, buyers[0], pricey["id"])

    # Pending payments are not revenue
    client.post("/api/payments/create-intent", headers=buyers[1], json={"course_id": pricey["id"]})

    data = client.get("/api/instructor/revenue", headers=instructor_headers).json()["data"]
    assert [c["title"] for c in data["courses"]] == ["Pricey", "Cheap"]
    assert data["total_sales"] == 4
    assert data["total_revenue"] == 55.0
    assert data["total_platform_fee"] + data["total_earnings"] == data["total_revenue"]
    assert len(data["recent_sales"]) == 4


def test_revenue_excludes_other_instructors(client, instructor_headers, student_headers, db_session):
    other = make_user(db_session, role=RoleEnum.INSTRUCTOR)
    course = create_course(client, auth_headers(other), price=25)
    purchase(client, student_headers, course["id"])

    data = client.get("/api/instructor/revenue", headers=instructor_headers).json()["data"]
    assert data["total_sales"] == 0
    assert data["courses"] == []


def test_revenue_requires_instructor(client, student_headers):
    assert_error(client.get("/api/instructor/revenue", headers=student_headers), 403, "FORBIDDEN")
