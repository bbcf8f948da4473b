"""
Notifications app: admin broadcasts shown on the intern dashboard, with
per-user dismissal.
"""
