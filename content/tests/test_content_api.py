"""
API tests for the content app: gallery uploads and the public photo
stream, MoU filtering, document delivery and the ticker settings.
"""
from datetime import date

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from conftest import FlakyStorage
from content.models import Document, GalleryEntry, MoU, TickerSetting


def png(name="photo.png"):
    return SimpleUploadedFile(name, b"\x89PNG\r\n\x1a\n" + b"0" * 64, content_type="image/png")


@pytest.mark.django_db
def test_intern_uploads_collage_with_sanitized_names(intern_api, intern):
    resp = intern_api.post(
        "/api/content/gallery/",
        {"title": "CRT Week", "date": "2025-03-10", "files": [png("Day 1 (main hall).png"), png("b.png")]},
        format="multipart",
    )
    assert resp.status_code == 201, resp.content
    entry = GalleryEntry.objects.get(pk=resp.data["id"])
    assert len(entry.urls) == 2
    assert entry.uploader == "Ravi Kumar"
    assert entry.uploaded_by == intern
    first = entry.stored_files[0]
    assert first.startswith("gallery/")
    assert first.endswith("_Day_1_main_hall_.png")


@pytest.mark.django_db
def test_gallery_accepts_hosted_urls(admin_api):
    resp = admin_api.post(
        "/api/content/gallery/",
        {"title": "MoU signing", "urls": ["https://img.example/a.jpg,https://img.example/b.jpg"]},
        format="json",
    )
    assert resp.status_code == 201
    assert resp.data["url"] == "https://img.example/a.jpg,https://img.example/b.jpg"


@pytest.mark.django_db
def test_gallery_requires_a_file_or_url(admin_api):
    resp = admin_api.post("/api/content/gallery/", {"title": "Empty"}, format="json")
    assert resp.status_code == 400


@pytest.mark.django_db
def test_failed_upload_removes_files_already_stored(admin_api, monkeypatch):
    storage = FlakyStorage(fail_on=2)
    monkeypatch.setattr("common.uploads.default_storage", storage)

    resp = admin_api.post(
        "/api/content/gallery/",
        {"title": "Broken", "files": [png("a.png"), png("b.png"), png("c.png")]},
        format="multipart",
    )
    assert resp.status_code == 502
    assert storage.deleted == storage.saved and len(storage.saved) == 1
    assert not GalleryEntry.objects.exists()


@pytest.mark.django_db
def test_interns_delete_only_their_own_photos(intern_api, other_intern_api, admin_api, intern, other_intern):
    mine = GalleryEntry.objects.create(title="Mine", url="https://x/a.jpg", uploaded_by=intern)
    theirs = GalleryEntry.objects.create(title="Theirs", url="https://x/b.jpg", uploaded_by=other_intern)

    assert intern_api.delete(f"/api/content/gallery/{theirs.id}/").status_code == 403
    assert intern_api.delete(f"/api/content/gallery/{mine.id}/").status_code == 204
    assert admin_api.delete(f"/api/content/gallery/{theirs.id}/").status_code == 204


@pytest.mark.django_db
def test_photo_stream_flattens_and_sorts_newest_first(api_client):
    GalleryEntry.objects.create(title="Old", url="https://x/1.jpg", date=date(2024, 1, 5))
    GalleryEntry.objects.create(title="New", url="https://x/2.jpg,https://x/3.jpg", date=date(2025, 2, 1))

    resp = api_client.get("/api/content/gallery/photos/")
    assert resp.status_code == 200
    assert [p["url"] for p in resp.data] == ["https://x/2.jpg", "https://x/3.jpg", "https://x/1.jpg"]
    assert resp.data[0]["display_date"] == "01-02-2025"

    limited = api_client.get("/api/content/gallery/photos/", {"limit": 1})
    assert len(limited.data) == 1


@pytest.mark.django_db
def test_gallery_delete_schedules_file_cleanup(admin_api, django_capture_on_commit_callbacks, monkeypatch):
    removed = []
    monkeypatch.setattr("content.tasks.discard_files", lambda names: removed.extend(names))
    entry = GalleryEntry.objects.create(title="T", url="/media/gallery/1_a.png", stored_files=["gallery/1_a.png"])

    with django_capture_on_commit_callbacks(execute=True):
        admin_api.delete(f"/api/content/gallery/{entry.id}/")

    assert removed == ["gallery/1_a.png"]


@pytest.mark.django_db
def test_mou_public_filters(api_client):
    MoU.objects.create(partner="NXP Semiconductors", scope="Embedded internships", status="Active")
    MoU.objects.create(partner="Ceremorphic", scope="VLSI research", status="Under Review")

    by_scope = api_client.get("/api/content/mous/", {"search": "vlsi"})
    assert [m["partner"] for m in by_scope.data] == ["Ceremorphic"]

    active = api_client.get("/api/content/mous/", {"status": "Active"})
    assert [m["partner"] for m in active.data] == ["NXP Semiconductors"]

    everything = api_client.get("/api/content/mous/", {"status": "All"})
    assert len(everything.data) == 2


@pytest.mark.django_db
def test_admin_adds_mou_with_logo(admin_api, intern_api):
    payload = {"partner": "Texas Instruments", "scope": "Analog", "status": "Active", "logo": png("ti logo.png")}
    assert intern_api.post("/api/content/mous/", payload, format="multipart").status_code == 403

    resp = admin_api.post(
        "/api/content/mous/",
        {"partner": "Texas Instruments", "scope": "Analog", "status": "Active", "logo": png("ti logo.png")},
        format="multipart",
    )
    assert resp.status_code == 201, resp.content
    assert MoU.objects.get(pk=resp.data["id"]).logo.name.startswith("logos/")


@pytest.mark.django_db
def test_documents_are_scoped_to_assignee_or_everyone(admin_api, intern_api, intern, other_intern):
    upload = SimpleUploadedFile("guide.pdf", b"x" * 2048, content_type="application/pdf")
    resp = admin_api.post("/api/content/documents/", {"title": "Guide", "file": upload}, format="multipart")
    assert resp.status_code == 201, resp.content
    assert resp.data["size"] == "2.0 KB"
    assert resp.data["assigned_name"] == "All Interns"

    private = SimpleUploadedFile("offer.pdf", b"y" * 100, content_type="application/pdf")
    resp = admin_api.post(
        "/api/content/documents/",
        {"title": "Offer", "file": private, "assigned_to": other_intern.id},
        format="multipart",
    )
    assert resp.status_code == 201
    assert resp.data["assigned_name"] == "Sita Devi"

    titles = [d["title"] for d in intern_api.get("/api/content/documents/").data]
    assert titles == ["Guide"]
    assert len(admin_api.get("/api/content/documents/").data) == 2


@pytest.mark.django_db
def test_document_download_and_intern_cannot_upload(admin_api, intern_api):
    upload = SimpleUploadedFile("rules.txt", b"be on time", content_type="text/plain")
    doc_id = admin_api.post("/api/content/documents/", {"title": "Rules", "file": upload}, format="multipart").data["id"]

    resp = intern_api.get(f"/api/content/documents/{doc_id}/download/")
    assert resp.status_code == 200
    assert b"".join(resp.streaming_content) == b"be on time"
    assert 'filename="Rules.txt"' in resp["Content-Disposition"]

    again = SimpleUploadedFile("x.txt", b"x", content_type="text/plain")
    assert intern_api.post("/api/content/documents/", {"title": "X", "file": again}, format="multipart").status_code == 403


@pytest.mark.django_db
def test_ticker_settings_are_admin_only(admin_api, intern_api):
    assert intern_api.get("/api/content/ticker-settings/").status_code == 403
    resp = admin_api.post("/api/content/ticker-settings/", {"value": "Register for CRT"}, format="json")
    assert resp.status_code == 201
    assert TickerSetting.objects.get().is_active is True
    assert Document.objects.count() == 0
