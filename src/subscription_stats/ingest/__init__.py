"""Input loading.

Reads the JSON input file and validates it into immutable models that the
reports consume.
"""
