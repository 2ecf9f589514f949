"""Transactional email boundary (SMTP)."""

from micourses.boundary.mail.mailer import Mailer

__all__ = ["Mailer"]
