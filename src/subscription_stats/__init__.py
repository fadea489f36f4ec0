"""subscription_stats package.

Contains modules for loading subscription/billing records from a JSON file,
validating them, and computing summary reports over the in-memory collection.

Architecture:
- Pydantic models validate the input document
- pandas is used for the grouped aggregations
- Each report is a pure function of the loaded collection
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
