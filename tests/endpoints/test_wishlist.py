from tests.helpers.asserts import assert_error
from tests.helpers.factories import create_course


def test_wishlist_add_list_remove(client, instructor_headers, instructor, student_headers):
    print("\n[TEST] Wishlist membership")
    first = create_course(client, instructor_headers, title="First")
    second = create_course(client, instructor_headers, title="Second")

    for course in (first, second):
        response = client.post("/api/wishlist", headers=student_headers, json={"course_id": course["id"]})
        assert response.status_code == 201, response.text

    items = client.get("/api/wishlist", headers=student_headers).json()["data"]
    assert [item["course"]["title"] for item in items] == ["Second", "First"]
    assert items[0]["course"]["instructor"]["id"] == instructor.id

    response = client.delete("/api/wishlist", headers=student_headers, params={"course_id": first["id"]})
    assert response.status_code == 200
    assert response.json()["data"] == {"success": True}

    items = client.get("/api/wishlist", headers=student_headers).json()["data"]
    assert [item["course_id"] for item in items] == [second["id"]]


def test_wishlist_duplicate_is_conflict(client, instructor_headers, student_headers):
    course = create_course(client, instructor_headers)
    assert client.post("/api/wishlist", headers=student_headers, json={"course_id": course["id"]}).status_code == 201

    response = client.post("/api/wishlist", headers=student_headers, json={"course_id": course["id"]})
    assert_error(response, 409, "ALREADY_WISHLISTED")


def test_wishlist_unknown_course(client, student_headers):
    response = client.post("/api/wishlist", headers=student_headers, json={"course_id": 31337})
    assert_error(response, 404, "NOT_FOUND")


def test_removing_absent_course_is_noop(client, student_headers):
    response = client.delete("/api/wishlist", headers=student_headers, params={"course_id": 31337})
    assert response.status_code == 200
    assert response.json()["data"] == {"success": True}


def test_wishlist_is_per_user(client, instructor_headers, student_headers):
    course = create_course(client, instructor_headers)
    client.post("/api/wishlist", headers=student_headers, json={"course_id": course["id"]})

    assert client.get("/api/wishlist", headers=instructor_headers).json()["data"] == []
