"""
Pytest configuration and fixtures
"""
from types import SimpleNamespace
import mongomock
import pytest
from smms import database
from smms.main import create_app

TEST_PASSWORD = "secret123"


@pytest.fixture
def db():
    return mongomock.MongoClient()["smms_test"]


@pytest.fixture
def app(db, tmp_path, monkeypatch):
    # All collection accessors go through smms.database.mongo
    monkeypatch.setattr(database, "mongo", SimpleNamespace(db=db))
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "MONGO_URI": "mongodb://localhost:27017/smms_test",
        "SEED_ON_STARTUP": False,
        "BCRYPT_LOG_ROUNDS": 4,
        "UPLOAD_FOLDER": str(tmp_path / "uploads"),
    })
    with app.app_context():
        database.init_db()
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def register(client, email, role="student", full_name="Test User", password=TEST_PASSWORD):
    return client.post("/api/register", json={
        "fullName": full_name,
        "email": email,
        "password": password,
        "role": role,
    })


def login(client, email, password=TEST_PASSWORD):
    return client.post("/api/login", json={"email": email, "password": password})


@pytest.fixture
def teacher_client(app):
    client = app.test_client()
    register(client, "teacher@example.com", role="teacher", full_name="Tess Teacher")
    assert login(client, "teacher@example.com").status_code == 200
    return client


@pytest.fixture
def student_client(app):
    client = app.test_client()
    register(client, "student@example.com", role="student", full_name="Sam Student")
    assert login(client, "student@example.com").status_code == 200
    return client


@pytest.fixture
def subject_id(db):
    return str(db["subjects"].find_one({"name": "Mathematics"})["_id"])


def quiz_payload(subject_id, **overrides):
    payload = {
        "title": "Arithmetic warm-up",
        "subjectId": subject_id,
        "questions": [
            {"questionText": "2 + 2 = ?", "options": ["3", "4", "5", "22"], "correctAnswer": "4"},
            # short field names sent by the browser client
            {"text": "3 x 3 = ?", "options": ["6", "9", "12", "33"], "correct": "9"},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def quiz_id(teacher_client, subject_id):
    response = teacher_client.post("/api/quizzes", json=quiz_payload(subject_id))
    assert response.status_code == 201
    return response.get_json()["quizId"]
