"""Member directory adapters for eligibility checks."""
