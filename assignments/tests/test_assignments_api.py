"""
API tests for tasks and submissions.
"""
import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone

from assignments.comments import next_comment_id
from assignments.models import Submission, Task
from conftest import FlakyStorage


@pytest.fixture
def task(db, intern, portal_admin):
    return Task.objects.create(title="Build login page", assigned_to=intern, created_by=portal_admin)


@pytest.mark.django_db
def test_admin_creates_pending_task(admin_api, intern):
    resp = admin_api.post(
        "/api/tasks/",
        {"title": "Write report", "assigned_to": intern.id, "due_date": "2025-04-01", "priority": "High"},
        format="json",
    )
    assert resp.status_code == 201, resp.content
    assert resp.data["status"] == "Pending"
    assert resp.data["comments"] == []
    assert resp.data["assigned_name"] == "Ravi Kumar"


@pytest.mark.django_db
def test_intern_cannot_create_or_delete_tasks(intern_api, intern, task):
    resp = intern_api.post("/api/tasks/", {"title": "X", "assigned_to": intern.id}, format="json")
    assert resp.status_code == 403
    assert intern_api.delete(f"/api/tasks/{task.id}/").status_code == 403


@pytest.mark.django_db
def test_task_visibility_and_status_filter(admin_api, intern_api, other_intern_api, intern, other_intern, portal_admin):
    Task.objects.create(title="A", assigned_to=intern, status=Task.STATUS_COMPLETED)
    Task.objects.create(title="B", assigned_to=other_intern)

    assert [t["title"] for t in intern_api.get("/api/tasks/").data] == ["A"]
    assert [t["title"] for t in admin_api.get("/api/tasks/", {"status": "Pending"}).data] == ["B"]
    assert len(admin_api.get("/api/tasks/", {"status": "All"}).data) == 2


@pytest.mark.django_db
def test_assignee_moves_task_and_outsider_cannot(intern_api, other_intern_api, task):
    resp = intern_api.post(f"/api/tasks/{task.id}/status/", {"status": "In Progress"}, format="json")
    assert resp.status_code == 200
    task.refresh_from_db()
    assert task.status == "In Progress"

    assert other_intern_api.post(f"/api/tasks/{task.id}/status/", {"status": "Completed"}, format="json").status_code == 404
    assert intern_api.post(f"/api/tasks/{task.id}/status/", {"status": "Done"}, format="json").status_code == 400


@pytest.mark.django_db
def test_task_comments_are_appended(admin_api, intern_api, task):
    first = intern_api.post(f"/api/tasks/{task.id}/comments/", {"text": "Started on it"}, format="json")
    second = admin_api.post(f"/api/tasks/{task.id}/comments/", {"text": "Great"}, format="json")
    assert first.status_code == second.status_code == 201

    task.refresh_from_db()
    assert [(c["user"], c["role"], c["text"]) for c in task.comments] == [
        ("Ravi Kumar", "intern", "Started on it"),
        ("Dr. Admin", "admin", "Great"),
    ]
    assert task.comments[0]["id"] < task.comments[1]["id"]
    assert intern_api.post(f"/api/tasks/{task.id}/comments/", {"text": "  "}, format="json").status_code == 400


def test_comment_ids_stay_unique():
    far_future = 10 ** 15
    assert next_comment_id([{"id": far_future}]) == far_future + 1
    assert next_comment_id([]) > 0


@pytest.mark.django_db
def test_intern_submits_one_row_per_file(intern_api, intern):
    files = [
        SimpleUploadedFile("report.pdf", b"%PDF-1.4", content_type="application/pdf"),
        SimpleUploadedFile("slides.pptx", b"PK", content_type="application/octet-stream"),
    ]
    resp = intern_api.post("/api/submissions/", {"title": "Week 1", "files": files}, format="multipart")
    assert resp.status_code == 201, resp.content
    assert [row["file_name"] for row in resp.data] == ["report.pdf", "slides.pptx"]

    rows = Submission.objects.order_by("id")
    assert rows.count() == 2
    assert all(r.status == "Pending" and r.comments == [] for r in rows)
    assert rows[0].date == timezone.localdate()
    assert rows[0].intern_name == "Ravi Kumar"
    assert rows[0].file.name.startswith("submissions/")


@pytest.mark.django_db
def test_submission_needs_files(intern_api):
    assert intern_api.post("/api/submissions/", {"title": "Empty"}, format="multipart").status_code == 400


@pytest.fixture
def submission(db, intern):
    return Submission.objects.create(intern=intern, intern_name="Ravi Kumar", title="Week 1", file="submissions/1_a.pdf")


@pytest.mark.django_db
def test_submission_visibility_and_review(admin_api, intern_api, other_intern_api, submission):
    assert len(intern_api.get("/api/submissions/").data) == 1
    assert other_intern_api.get("/api/submissions/").data == []

    assert intern_api.post(f"/api/submissions/{submission.id}/review/").status_code == 403
    resp = admin_api.post(f"/api/submissions/{submission.id}/review/")
    assert resp.status_code == 200
    assert resp.data["status"] == "Reviewed"


@pytest.mark.django_db
def test_submission_comments_by_owner_and_admin(admin_api, intern_api, other_intern_api, submission):
    assert admin_api.post(f"/api/submissions/{submission.id}/comments/", {"text": "Fix the intro"}, format="json").status_code == 201
    assert intern_api.post(f"/api/submissions/{submission.id}/comments/", {"text": "Done"}, format="json").status_code == 201
    assert other_intern_api.post(f"/api/submissions/{submission.id}/comments/", {"text": "Hi"}, format="json").status_code == 404

    submission.refresh_from_db()
    assert [(c["sender"], c["role"]) for c in submission.comments] == [("Dr. Admin", "admin"), ("Ravi Kumar", "intern")]
    assert all("time" in c for c in submission.comments)


@pytest.mark.django_db
def test_failed_submission_upload_removes_stored_files(intern_api, monkeypatch):
    storage = FlakyStorage(fail_on=2)
    monkeypatch.setattr("common.uploads.default_storage", storage)
    files = [SimpleUploadedFile(f"part{i}.pdf", b"%PDF-1.4", content_type="application/pdf") for i in range(3)]

    resp = intern_api.post("/api/submissions/", {"title": "Week 2", "files": files}, format="multipart")
    assert resp.status_code == 502
    assert storage.deleted == storage.saved and len(storage.saved) == 1
    assert not Submission.objects.exists()


@pytest.mark.django_db
def test_deleting_submission_removes_its_file(admin_api, submission, django_capture_on_commit_callbacks, monkeypatch):
    removed = []
    monkeypatch.setattr("content.tasks.discard_files", lambda names: removed.extend(names))

    with django_capture_on_commit_callbacks(execute=True):
        assert admin_api.delete(f"/api/submissions/{submission.id}/").status_code == 204

    assert removed == ["submissions/1_a.pdf"]
