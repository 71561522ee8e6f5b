"""Services Layer: orchestration of gateway IO around core logic."""
