"""Conversion core: models, decoding, aggregation and encoding."""
