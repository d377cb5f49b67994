"""Core — pure domain types, errors, contracts and seed data (no IO)."""
