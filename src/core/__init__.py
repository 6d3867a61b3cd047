"""NEO Tracker core: domain, contracts, configuration and validation."""
