"""Read preferences, write concerns and option merging for MongoDB command documents."""

__version__ = "0.1.0"
__all__ = ["common"]