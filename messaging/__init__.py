"""Messaging app initialization.

Unified messages between interns and the admin team: the shared admin
inbox, intern-to-intern chats and per-task threads.
"""
