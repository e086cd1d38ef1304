"""CLI command modules for resmerge."""
