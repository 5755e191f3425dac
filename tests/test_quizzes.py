from bson import ObjectId
from tests.conftest import quiz_payload


def test_teacher_creates_quiz(teacher_client, subject_id, db):
    response = teacher_client.post("/api/quizzes", json=quiz_payload(subject_id))

    assert response.status_code == 201
    quiz = db["quizzes"].find_one({"_id": ObjectId(response.get_json()["quizId"])})
    assert quiz["title"] == "Arithmetic warm-up"
    assert quiz["subject"] == ObjectId(subject_id)
    assert [q["questionText"] for q in quiz["questions"]] == ["2 + 2 = ?", "3 x 3 = ?"]
    assert [q["correctAnswer"] for q in quiz["questions"]] == ["4", "9"]
    assert all(isinstance(q["_id"], ObjectId) for q in quiz["questions"])


def test_student_cannot_create_quiz(student_client, subject_id, db):
    response = student_client.post("/api/quizzes", json=quiz_payload(subject_id))

    assert response.status_code == 403
    assert db["quizzes"].count_documents({}) == 0


def test_anonymous_cannot_create_quiz(client, subject_id):
    assert client.post("/api/quizzes", json=quiz_payload(subject_id)).status_code == 401


def test_quiz_requires_questions(teacher_client, subject_id):
    response = teacher_client.post("/api/quizzes", json=quiz_payload(subject_id, questions=[]))

    assert response.status_code == 400
    assert "at least one question" in response.get_json()["message"]


def test_quiz_rejects_answer_missing_from_options(teacher_client, subject_id, db):
    payload = quiz_payload(subject_id, questions=[
        {"questionText": "Capital of France?", "options": ["Rome", "Madrid", "Berlin", "Lisbon"],
         "correctAnswer": "Paris"},
    ])

    response = teacher_client.post("/api/quizzes", json=payload)

    assert response.status_code == 400
    assert "Paris" in response.get_json()["message"]
    assert db["quizzes"].count_documents({}) == 0


def test_quiz_requires_four_options(teacher_client, subject_id):
    payload = quiz_payload(subject_id, questions=[
        {"questionText": "1 + 1 = ?", "options": ["1", "2"], "correctAnswer": "2"},
    ])
    assert teacher_client.post("/api/quizzes", json=payload).status_code == 400


def test_quiz_rejects_unknown_subject(teacher_client):
    assert teacher_client.post("/api/quizzes", json=quiz_payload("bogus")).status_code == 400
    assert teacher_client.post("/api/quizzes", json=quiz_payload(str(ObjectId()))).status_code == 404


def test_student_never_receives_correct_answers(student_client, quiz_id):
    response = student_client.get(f"/api/quizzes/{quiz_id}")

    assert response.status_code == 200
    quiz = response.get_json()["quiz"]
    assert len(quiz["questions"]) == 2
    for question in quiz["questions"]:
        assert "correctAnswer" not in question
        assert len(question["options"]) == 4
    assert "correctAnswer" not in response.get_data(as_text=True)


def test_teacher_receives_full_quiz(teacher_client, quiz_id):
    quiz = teacher_client.get(f"/api/quizzes/{quiz_id}").get_json()["quiz"]

    assert [q["correctAnswer"] for q in quiz["questions"]] == ["4", "9"]


def test_get_missing_quiz(student_client):
    assert student_client.get(f"/api/quizzes/{ObjectId()}").status_code == 404
    assert student_client.get("/api/quizzes/not-an-id").status_code == 400


def test_quizzes_by_subject(student_client, quiz_id, subject_id, db):
    other_subject = str(db["subjects"].find_one({"name": "Science"})["_id"])

    response = student_client.get(f"/api/quizzes/subject/{subject_id}")

    assert response.status_code == 200
    quizzes = response.get_json()["quizzes"]
    assert [q["_id"] for q in quizzes] == [quiz_id]
    assert quizzes[0]["teacher"]["fullName"] == "Tess Teacher"
    assert "correctAnswer" not in response.get_data(as_text=True)

    empty = student_client.get(f"/api/quizzes/subject/{other_subject}").get_json()
    assert empty == {"success": True, "quizzes": []}


def test_create_quiz_rejects_non_object_body(teacher_client, subject_id, db):
    response = teacher_client.post("/api/quizzes", json=[quiz_payload(subject_id)])

    assert response.status_code == 400
    assert db["quizzes"].count_documents({}) == 0


def test_create_quiz_rejects_wrong_field_types(teacher_client, subject_id):
    assert teacher_client.post("/api/quizzes", json=quiz_payload(12345)).status_code == 400
    assert teacher_client.post("/api/quizzes", json=quiz_payload(subject_id, questions="2 + 2")).status_code == 400
