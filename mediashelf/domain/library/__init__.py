"""Library domain: books, tags and media libraries."""
