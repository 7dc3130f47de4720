"""Shared utilities for the freelancer graph pipeline."""
