"""Business logic layer for the media app.

This package contains the media manager operations:
- Folder listing, breadcrumbs and the directory picker
- Directory create, delete and move
- File delete, rename, move and upload ingestion

All business logic should be implemented here, separate from
views (HTTP layer) and infrastructure (external systems).
"""
