"""Infrastructure layer for the media app.

This package contains integrations with external systems:
- Storage backends (local filesystem, S3/MinIO/R2)
- MIME type lookup
- Path sanitization and URL helpers

Keep infrastructure concerns separate from business logic.
"""
