"""Insurance management API."""
