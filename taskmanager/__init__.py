"""Notification delivery core of the task manager application."""
