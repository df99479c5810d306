from coursex.core.constants import RoleEnum
from tests.helpers.asserts import assert_error
from tests.helpers.factories import auth_headers, course_payload, create_course, enroll, lesson_payload, make_user


def test_create_course_starts_unpublished_with_slug(client, instructor_headers, instructor):
    print("\n[TEST] Create course")
    payload = course_payload(title="Intro to Python!", lessons=2)
    payload["lessons"][0]["resources"] = ["https://docs.test/a.pdf", "https://docs.test/b.pdf"]

    response = client.post("/api/courses", headers=instructor_headers, json=payload)
    assert response.status_code == 201, response.text
    data = response.json()["data"]
    assert data["slug"] == "intro-to-python"
    assert data["published"] is False
    assert data["price"] == 0
    assert data["instructor_id"] == instructor.id
    assert data["instructor"]["name"] == instructor.name
    assert [lesson["title"] for lesson in data["lessons"]] == ["Lesson 1", "Lesson 2"]
    assert [r["url"] for r in data["lessons"][0]["resources"]] == ["https://docs.test/a.pdf", "https://docs.test/b.pdf"]


def test_slug_collision_gets_timestamp_suffix(client, instructor_headers):
    first = create_course(client, instructor_headers, title="Data Science", publish=False)
    second = create_course(client, instructor_headers, title="Data Science", publish=False)

    assert first["slug"] == "data-science"
    assert second["slug"].startswith("data-science-")
    suffix = second["slug"][len("data-science-"):]
    assert suffix.isdigit()


def test_create_course_requires_instructor(client, student_headers):
    response = client.post("/api/courses", headers=student_headers, json=course_payload())
    assert_error(response, 403, "FORBIDDEN")


def test_create_course_requires_authentication(client):
    response = client.post("/api/courses", json=course_payload())
    assert_error(response, 401, "UNAUTHORIZED")


def test_create_course_validates_required_fields(client, instructor_headers):
    payload = course_payload()
    del payload["category"]
    response = client.post("/api/courses", headers=instructor_headers, json=payload)
    assert_error(response, 422, "VALIDATION_ERROR")

    payload = course_payload(price=-1)
    response = client.post("/api/courses", headers=instructor_headers, json=payload)
    assert_error(response, 422, "VALIDATION_ERROR")


def test_get_course_orders_lessons(client, instructor_headers):
    payload = course_payload(lessons=0)
    payload["lessons"] = [lesson_payload(3), lesson_payload(1), lesson_payload(2)]
    created = client.post("/api/courses", headers=instructor_headers, json=payload).json()["data"]

    response = client.get(f"/api/courses/{created['id']}")
    assert response.status_code == 200
    assert [lesson["order"] for lesson in response.json()["data"]["lessons"]] == [1, 2, 3]

    by_slug = client.get(f"/api/courses/slug/{created['slug']}")
    assert by_slug.status_code == 200
    assert by_slug.json()["data"]["id"] == created["id"]


def test_get_missing_course(client):
    assert_error(client.get("/api/courses/9999"), 404, "NOT_FOUND")
    assert_error(client.get("/api/courses/slug/nope"), 404, "NOT_FOUND")


def test_catalog_lists_published_courses_with_filters(client, instructor_headers):
    create_course(client, instructor_headers, title="Rust Basics")
    create_course(client, instructor_headers, title="Hidden Draft", publish=False)
    payload = course_payload(title="Watercolor Painting")
    payload["category"] = "art"
    art = client.post("/api/courses", headers=instructor_headers, json=payload).json()["data"]
    client.put(f"/api/courses/{art['id']}", headers=instructor_headers, json={"published": True})

    titles = {c["title"] for c in client.get("/api/courses").json()["data"]}
    assert titles == {"Rust Basics", "Watercolor Painting"}

    art_only = client.get("/api/courses", params={"category": "art"}).json()["data"]
    assert [c["title"] for c in art_only] == ["Watercolor Painting"]

    search = client.get("/api/courses", params={"search": "rust"}).json()["data"]
    assert [c["title"] for c in search] == ["Rust Basics"]


def test_list_my_courses(client, instructor_headers, db_session):
    create_course(client, instructor_headers, title="Mine One", publish=False)
    other = make_user(db_session, role=RoleEnum.INSTRUCTOR)
    create_course(client, auth_headers(other), title="Not Mine")

    response = client.get("/api/courses/mine", headers=instructor_headers)
    assert response.status_code == 200
    assert [c["title"] for c in response.json()["data"]] == ["Mine One"]


def test_update_course_fields(client, instructor_headers):
    course = create_course(client, instructor_headers, publish=False)
    response = client.put(
        f"/api/courses/{course['id']}",
        headers=instructor_headers,
        json={"title": "Renamed", "price": 15.5, "published": True}
    )
    assert response.status_code == 200, response.text
    data = response.json()["data"]
    assert data["title"] == "Renamed"
    assert data["price"] == 15.5
    assert data["published"] is True
    # Slug stays stable across edits
    assert data["slug"] == course["slug"]


def test_update_course_forbidden_for_non_owner(client, instructor_headers, student_headers, db_session):
    course = create_course(client, instructor_headers)
    other = make_user(db_session, role=RoleEnum.INSTRUCTOR)

    assert_error(client.put(f"/api/courses/{course['id']}", headers=auth_headers(other), json={"title": "X"}), 403, "FORBIDDEN")
    assert_error(client.put(f"/api/courses/{course['id']}", headers=student_headers, json={"title": "X"}), 403, "FORBIDDEN")
    assert_error(client.put("/api/courses/9999", headers=instructor_headers, json={"title": "X"}), 404, "NOT_FOUND")


def test_update_reconciles_lessons_and_preserves_ids(client, instructor_headers, student_headers):
    print("\n[TEST] Lesson reconciliation")
    course = create_course(client, instructor_headers, lessons=3)
    first, second, third = course["lessons"]

    print("[1] Student completes the first and third lessons")
    assert enroll(client, student_headers, course["id"]).status_code == 201
    for lesson in (first, third):
        r = client.post("/api/lessons/complete", headers=student_headers, json={"lesson_id": lesson["id"], "course_id": course["id"]})
        assert r.status_code == 200

    print("[2] Instructor edits lesson 1, drops lesson 3 and adds a new one")
    lessons = [
        dict(lesson_payload(1, resources=["https://docs.test/new.pdf"]), id=first["id"], title="Lesson 1 (revised)"),
        dict(lesson_payload(2), id=second["id"]),
        lesson_payload(3, title="Brand new"),
    ]
    response = client.put(f"/api/courses/{course['id']}", headers=instructor_headers, json={"lessons": lessons})
    assert response.status_code == 200, response.text
    updated = response.json()["data"]["lessons"]

    assert [lesson["id"] for lesson in updated[:2]] == [first["id"], second["id"]]
    assert updated[0]["title"] == "Lesson 1 (revised)"
    assert [r["url"] for r in updated[0]["resources"]] == ["https://docs.test/new.pdf"]
    assert updated[2]["title"] == "Brand new"
    assert updated[2]["id"] not in (first["id"], second["id"])

    print("[3] Progress on the retained lesson survives, the dropped one is gone")
    progress = client.get(f"/api/courses/{course['id']}/progress", headers=student_headers).json()["data"]
    assert progress["completed_lesson_ids"] == [first["id"]]


def test_update_with_unknown_lesson_id_creates_lesson(client, instructor_headers):
    course = create_course(client, instructor_headers, lessons=1)
    response = client.put(
        f"/api/courses/{course['id']}",
        headers=instructor_headers,
        json={"lessons": [dict(lesson_payload(1), id=987654)]}
    )
    assert response.status_code == 200
    lessons = response.json()["data"]["lessons"]
    assert len(lessons) == 1
    assert lessons[0]["id"] != 987654


def test_instructor_stats(client, instructor_headers, student_headers, db_session):
    rated = create_course(client, instructor_headers)
    unrated = create_course(client, instructor_headers)
    create_course(client, instructor_headers, publish=False)

    other_student = make_user(db_session)
    for headers, rating in ((student_headers, 5), (auth_headers(other_student), 4)):
        assert enroll(client, headers, rated["id"]).status_code == 201
        r = client.post("/api/reviews", headers=headers, json={"course_id": rated["id"], "rating": rating})
        assert r.status_code == 201
    assert enroll(client, student_headers, unrated["id"]).status_code == 201

    response = client.get("/api/instructor/stats", headers=instructor_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total_courses"] == 3
    assert data["published_courses"] == 2
    assert data["total_enrollments"] == 3
    # 4.5 on the rated course, 0 on the other two
    assert data["average_rating"] == 1.5
