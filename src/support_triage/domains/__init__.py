"""Domain taxonomies (keyword tables, templates, replies) for the triage pipeline."""
