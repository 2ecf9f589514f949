"""Boundary adapters: database, media host and mailer."""
