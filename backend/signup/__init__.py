"""User signup: form validation, password hashing, account and session creation."""
