"""Deal Feed API package."""
