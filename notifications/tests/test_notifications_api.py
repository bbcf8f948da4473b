import pytest

from notifications.models import Notification, NotificationDismissal


@pytest.mark.django_db
def test_admin_posts_and_intern_reads(admin_api, intern_api):
    resp = admin_api.post(
        "/api/notifications/",
        {"subject": "Exam Schedule Released", "message": "See the documents tab.", "type": "info"},
        format="json",
    )
    assert resp.status_code == 201, resp.content
    assert resp.data["created_by_name"] == "Dr. Admin"
    assert resp.data["date"]

    listed = intern_api.get("/api/notifications/")
    assert [n["subject"] for n in listed.data] == ["Exam Schedule Released"]
    assert listed.data[0]["dismissed"] is False


@pytest.mark.django_db
def test_interns_cannot_post_or_delete(intern_api, portal_admin):
    note = Notification.objects.create(subject="S", message="M", created_by=portal_admin)
    assert intern_api.post("/api/notifications/", {"subject": "x", "message": "y"}, format="json").status_code == 403
    assert intern_api.delete(f"/api/notifications/{note.id}/").status_code == 403
    assert intern_api.post("/api/notifications/urgent-alert/").status_code == 403


@pytest.mark.django_db
def test_urgent_alert_uses_canned_text(admin_api):
    resp = admin_api.post("/api/notifications/urgent-alert/")
    assert resp.status_code == 201
    note = Notification.objects.get()
    assert note.type == "urgent"
    assert note.subject == "Urgent Review Alert"
    assert note.message.startswith("📢 ALERT: There will be a review on the works today.")


@pytest.mark.django_db
def test_dismiss_is_per_user_and_idempotent(intern_api, other_intern_api, intern, portal_admin):
    note = Notification.objects.create(subject="S", message="M", created_by=portal_admin)

    assert intern_api.post(f"/api/notifications/{note.id}/dismiss/").status_code == 200
    assert intern_api.post(f"/api/notifications/{note.id}/dismiss/").status_code == 200
    assert NotificationDismissal.objects.filter(user=intern).count() == 1

    assert intern_api.get("/api/notifications/", {"active": "1"}).data == []
    assert intern_api.get("/api/notifications/").data[0]["dismissed"] is True
    assert len(other_intern_api.get("/api/notifications/", {"active": "1"}).data) == 1


@pytest.mark.django_db
def test_admin_deletes_notification(admin_api, portal_admin):
    note = Notification.objects.create(subject="S", message="M", created_by=portal_admin)
    assert admin_api.delete(f"/api/notifications/{note.id}/").status_code == 204
    assert not Notification.objects.exists()


@pytest.mark.django_db
def test_anonymous_cannot_list(api_client):
    assert api_client.get("/api/notifications/").status_code == 401


@pytest.mark.django_db
def test_scheduled_urgent_alert_task():
    from notifications.tasks import post_urgent_alert_task

    pk = post_urgent_alert_task.delay().get()
    note = Notification.objects.get(pk=pk)
    assert note.type == "urgent"
    assert note.created_by is None
