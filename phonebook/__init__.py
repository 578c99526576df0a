"""Phonebook API: authentication and per-user contacts."""
