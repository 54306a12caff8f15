"""Books bounded context: HTTP interface."""
