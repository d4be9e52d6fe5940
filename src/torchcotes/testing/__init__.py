"""Test helpers for torchcotes."""
