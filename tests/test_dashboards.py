"""
Tests for the teacher and student dashboard routes
"""
from app.core.config import settings


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == settings.APP_NAME


def test_health(client):
    assert client.get("/api/health").json() == {"status": "healthy"}


class TestTeacherDashboard:

    def test_overview(self, client):
        response = client.get("/api/teacher/overview")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["totalStudents"] == 5
        assert data["totalAssignments"] == 4
        assert data["submissions"] == 5
        assert len(data["performance"]) == 4
        assert data["performance"][0]["averageScore"] == 82
        assert data["progress"][-1] == {"month": "May", "score": 88}

    def test_submissions_are_joined(self, client):
        rows = client.get("/api/teacher/submissions").json()["data"]
        assert len(rows) == 5
        first = rows[0]
        assert first["id"] == "sub1"
        assert first["studentName"] == "Arjun Sharma"
        assert first["assignmentTitle"] == "Quadratic Equations"
        assert first["subject"] == "Mathematics"
        assert first["letterGrade"] == "B"
        assert first["submittedAt"] == "2023-05-10T14:30:00Z"

    def test_students(self, client):
        rows = client.get("/api/teacher/students").json()["data"]
        assert [r["id"] for r in rows] == ["s1", "s2", "s3", "s4", "s5"]
        assert rows[0]["submissionCount"] == 1
        assert rows[0]["averageScore"] == 85
        assert rows[0]["avatarUrl"].startswith("https://")

    def test_student_detail(self, client):
        data = client.get("/api/teacher/students/s5").json()["data"]
        assert data["name"] == "Vikram Singh"
        assert [s["id"] for s in data["submissions"]] == ["sub5"]

    def test_student_detail_unknown(self, client):
        response = client.get("/api/teacher/students/s99")
        assert response.status_code == 404

    def test_message_student(self, client):
        response = client.post("/api/teacher/students/s1/message", json={"message": "See me"})
        assert response.status_code == 200
        assert response.json()["message"] == "Message sent to Arjun Sharma"

    def test_blank_message_rejected(self, client):
        response = client.post("/api/teacher/students/s1/message", json={"message": "   "})
        assert response.status_code == 400
        assert client.get("/api/notifications").json()["data"] == []

    def test_message_unknown_student(self, client):
        response = client.post("/api/teacher/students/s99/message", json={"message": "hi"})
        assert response.status_code == 404


class TestStudentDashboard:

    def test_dashboard(self, client):
        data = client.get("/api/student/dashboard").json()["data"]
        assert data["student"]["id"] == "s1"
        statuses = {a["id"]: a["status"] for a in data["assignments"]}
        assert statuses["a1"] == "completed"
        assert statuses["a2"] in ("pending", "overdue")
        assert [s["id"] for s in data["submissions"]] == ["sub1"]
        assert [r["id"] for r in data["recommendedResources"]] == ["r1"]
        assert data["recommendedResources"][0]["recommendedFor"] == [70, 85]

    def test_dashboard_for_other_student(self, client, monkeypatch):
        monkeypatch.setattr(settings, "ACTIVE_STUDENT_ID", "s4")
        data = client.get("/api/student/dashboard").json()["data"]
        assert data["student"]["name"] == "Aisha Khan"
        assert [r["id"] for r in data["recommendedResources"]] == ["r4"]

    def test_unknown_active_student(self, client, monkeypatch):
        monkeypatch.setattr(settings, "ACTIVE_STUDENT_ID", "ghost")
        assert client.get("/api/student/dashboard").status_code == 404

    def test_analytics(self, client):
        data = client.get("/api/student/analytics").json()["data"]
        assert data["studentName"] == "Arjun Sharma"
        assert data["averageScore"] == 85
        assert len(data["growth"]) == 6
        assert len(data["skills"]) == 6

    def test_assignments(self, client):
        data = client.get("/api/student/assignments").json()["data"]
        assert [a["dueDate"] for a in data] == ["2023-05-15", "2023-05-18", "2023-05-20", "2023-05-22"]

    def test_chat_greeting(self, client):
        data = client.get("/api/student/chat").json()["data"]
        assert data["sender"] == "EduAssist AI"
        assert "Arjun Sharma" in data["text"]

    def test_chat_reply(self, client):
        data = client.post("/api/student/chat", json={"query": "help with history"}).json()["data"]
        assert data["text"].startswith("History is all about")

    def test_blank_chat_rejected(self, client):
        response = client.post("/api/student/chat", json={"query": ""})
        assert response.status_code == 400
