"""Pipeline stages: deduplication, classification, formatting.

Each stage exposes a small, pure function API and consumes only the previous
stage's output type.
"""
