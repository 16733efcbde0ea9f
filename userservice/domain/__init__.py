"""Pure domain rules (validation, error types); no storage access here."""
