"""
Content app package for the internship portal.

Holds the public-facing material admins curate: the photo gallery, MoU
records, documents delivered to interns and the custom ticker lines shown
on the home page.  Stored files are cleaned up by a Celery task when their
row is deleted; see ``signals.py``.
"""
