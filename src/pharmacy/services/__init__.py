"""Service layer — drives the domain and returns ServiceResult."""
