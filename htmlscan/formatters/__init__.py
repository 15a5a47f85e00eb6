"""Machine-readable output formats for HTMLScan reports."""
