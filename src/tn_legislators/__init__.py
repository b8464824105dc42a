"""Tennessee state legislator lookup by street address."""
