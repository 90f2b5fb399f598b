"""My API demo service."""
