import pytest

from assignments.models import Submission, Task
from contact.models import ContactMessage


@pytest.mark.django_db
def test_dashboard_counts(admin_api, intern, other_intern):
    Task.objects.create(title="A", assigned_to=intern)
    Task.objects.create(title="B", assigned_to=intern, status=Task.STATUS_IN_PROGRESS)
    Task.objects.create(title="C", assigned_to=other_intern, status=Task.STATUS_COMPLETED)
    ContactMessage.objects.create(student_id="R1", email="a@b.c", message="x")
    ContactMessage.objects.create(student_id="R2", email="a@b.c", message="y", status="resolved")
    for i in range(7):
        Submission.objects.create(intern=intern, intern_name="Ravi Kumar", title=f"Week {i}", file=f"submissions/{i}.pdf")

    resp = admin_api.get("/api/dashboard/")
    assert resp.status_code == 200
    assert resp.data["total_interns"] == 2
    assert resp.data["active_tasks"] == 2
    assert resp.data["resolved_queries"] == 1
    assert resp.data["pending_queries"] == 1
    assert resp.data["total_submissions"] == 7
    assert [s["title"] for s in resp.data["latest_submissions"]] == [f"Week {i}" for i in (6, 5, 4, 3, 2)]


@pytest.mark.django_db
def test_dashboard_is_admin_only(intern_api):
    assert intern_api.get("/api/dashboard/").status_code == 403
