"""Tests for the misw client."""
