"""Data management for credibility reports: schemas and the report store."""
