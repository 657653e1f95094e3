"""Core services: customer repository, interaction ledger and dashboard aggregation."""
