import pytest
from django.core import mail
from django.core.mail import EmailMultiAlternatives

from contact.models import ContactMessage


def _query(**overrides):
    data = {"student_id": "R200123", "email": "student@example.com", "message": "When does the next batch start?"}
    data.update(overrides)
    return data


@pytest.fixture
def query(db):
    return ContactMessage.objects.create(**_query())


@pytest.mark.django_db
def test_public_contact_form(api_client):
    resp = api_client.post("/api/contact/messages/", _query(), format="json")
    assert resp.status_code == 201, resp.content
    assert resp.data["status"] == "pending"
    assert api_client.post("/api/contact/messages/", _query(message="   "), format="json").status_code == 400


@pytest.mark.django_db
def test_contact_form_is_throttled(api_client):
    codes = [api_client.post("/api/contact/messages/", _query(), format="json").status_code for _ in range(6)]
    assert codes[:5] == [201] * 5
    assert codes[5] == 429


@pytest.mark.django_db
def test_inbox_needs_portal_member_and_filters(admin_api, intern_api, api_client, portal_admin):
    ContactMessage.objects.create(**_query(student_id="A"))
    ContactMessage.objects.create(**_query(student_id="B"), status="resolved", resolved_by="Dr. Admin")

    assert api_client.get("/api/contact/messages/").status_code == 401
    assert len(intern_api.get("/api/contact/messages/").data) == 2

    assert len(admin_api.get("/api/contact/messages/").data) == 2
    assert [m["student_id"] for m in admin_api.get("/api/contact/messages/", {"filter": "unread"}).data] == ["A"]
    assert [m["student_id"] for m in admin_api.get("/api/contact/messages/", {"filter": "resolved"}).data] == ["B"]
    assert admin_api.get("/api/contact/messages/", {"filter": "spam"}).status_code == 400


@pytest.mark.django_db
def test_reply_emails_and_resolves(admin_api, query, settings):
    settings.EITP_REPLY_TO_EMAIL = "eitp@rgukt.ac.in"
    resp = admin_api.post(f"/api/contact/messages/{query.id}/reply/", {"message": "Next Monday."}, format="json")
    assert resp.status_code == 200, resp.content
    assert resp.data["status"] == "resolved"
    assert resp.data["resolved_by"] == "Dr. Admin"

    assert len(mail.outbox) == 1
    sent = mail.outbox[0]
    assert sent.to == ["student@example.com"]
    assert sent.reply_to == ["eitp@rgukt.ac.in"]
    assert "Next Monday." in sent.body
    assert "R200123" in sent.body


@pytest.mark.django_db
def test_failed_reply_leaves_query_pending(admin_api, query, monkeypatch):
    def broken_send(self, fail_silently=False):
        raise ConnectionRefusedError("smtp down")

    monkeypatch.setattr(EmailMultiAlternatives, "send", broken_send)
    resp = admin_api.post(f"/api/contact/messages/{query.id}/reply/", {"message": "Hello"}, format="json")
    assert resp.status_code == 502
    query.refresh_from_db()
    assert query.status == "pending"
    assert query.resolved_by == ""


@pytest.mark.django_db
def test_resolve_and_delete(admin_api, query):
    resp = admin_api.post(f"/api/contact/messages/{query.id}/resolve/")
    assert resp.data["status"] == "resolved"
    assert admin_api.delete(f"/api/contact/messages/{query.id}/").status_code == 204
    assert not ContactMessage.objects.exists()


@pytest.mark.django_db
def test_intern_works_the_inbox(intern_api, query):
    listed = intern_api.get("/api/contact/messages/", {"filter": "unread"})
    assert [m["id"] for m in listed.data] == [query.id]

    resp = intern_api.post(f"/api/contact/messages/{query.id}/reply/", {"message": "Check the notice board."}, format="json")
    assert resp.status_code == 200, resp.content
    assert resp.data["resolved_by"] == "Ravi Kumar"
    assert len(mail.outbox) == 1

    assert intern_api.delete(f"/api/contact/messages/{query.id}/").status_code == 204
