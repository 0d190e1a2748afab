"""Console renderers and JSON reports for passgen results."""
