"""Output rendering for ServiceResult (human, quiet, JSON)."""
