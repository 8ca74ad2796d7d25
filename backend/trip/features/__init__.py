"""
Feature modules for TRIP.

Each feature is a self-contained module with:
- models.py - dataclasses the feature works on
- schemas.py - Pydantic schemas
- calculation modules (summarizer, aggregator, resolver, ...)
"""
