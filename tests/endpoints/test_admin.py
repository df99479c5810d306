from coursex.core.constants import RoleEnum
from tests.helpers.asserts import assert_error
from tests.helpers.factories import auth_headers, create_course, enroll, purchase


def test_admin_stats_counts_platform_totals(client, admin_headers, instructor_headers, student_headers):
    print("\n[TEST] Admin platform statistics")
    free = create_course(client, instructor_headers, lessons=1)
    paid = create_course(client, instructor_headers, price=20)
    create_course(client, instructor_headers, publish=False)

    assert enroll(client, student_headers, free["id"]).status_code == 201
    purchase(client, student_headers, paid["id"])

    # A pending payment does not count as revenue
    client.post("/api/payments/create-intent", headers=instructor_headers, json={"course_id": paid["id"]})

    response = client.get("/api/admin/stats", headers=admin_headers)
    assert response.status_code == 200, response.text
    data = response.json()["data"]
    assert data["total_users"] == 3
    assert data["total_courses"] == 3
    assert data["total_enrollments"] == 2
    assert data["total_revenue"] == 20.0


def test_admin_stats_forbidden_for_non_admin(client, student_headers, instructor_headers):
    assert_error(client.get("/api/admin/stats", headers=student_headers), 403, "FORBIDDEN")
    assert_error(client.get("/api/admin/stats", headers=instructor_headers), 403, "FORBIDDEN")


def test_admin_can_promote_user_to_instructor(client, admin_headers, student):
    response = client.put(
        f"/api/admin/users/{student.id}/role",
        headers=admin_headers,
        json={"role": RoleEnum.INSTRUCTOR.value}
    )
    assert response.status_code == 200, response.text
    assert response.json()["data"]["role"] == RoleEnum.INSTRUCTOR.value

    me = client.get("/api/users/me", headers=auth_headers(student))
    assert me.json()["data"]["role"] == RoleEnum.INSTRUCTOR.value


def test_role_update_unknown_user(client, admin_headers):
    response = client.put("/api/admin/users/missing/role", headers=admin_headers, json={"role": "ADMIN"})
    assert_error(response, 404, "NOT_FOUND")


def test_role_update_rejects_unknown_role(client, admin_headers, student):
    response = client.put(f"/api/admin/users/{student.id}/role", headers=admin_headers, json={"role": "OWNER"})
    assert_error(response, 422, "VALIDATION_ERROR")


def test_role_update_forbidden_for_student(client, student_headers, student):
    response = client.put(f"/api/admin/users/{student.id}/role", headers=student_headers, json={"role": "ADMIN"})
    assert_error(response, 403, "FORBIDDEN")
