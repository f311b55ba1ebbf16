"""Collaborator implementations for devcenter."""
