"""Core menu logic.

Subpackages:
- filtering: eligibility predicates and the relaxing filter pipeline
- selection: category-balanced random selection
- scaling: per-party serving scaling
- reporting: nutrition aggregation and classification
- shopping: shopping list aggregation

Modules:
- tips: cooking tips
- engine: the pipeline chaining all of the above into a MenuBundle
"""
__all__ = ["filtering", "selection", "scaling", "reporting", "shopping", "tips", "engine"]
