"""Core Business Components.

This package contains independent business modules:
- drive: Path-addressed folder/file repository over Google Drive
- campaign: Campaign tree construction, read-back and touchpoint catalog
- ai: OpenAI-backed file analysis
- blob: Staged upload hand-off
"""
