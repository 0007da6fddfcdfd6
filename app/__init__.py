"""policyvault: cross-entity search over insurance policies, claims and documents."""
