"""api/routes: one router per resource."""
