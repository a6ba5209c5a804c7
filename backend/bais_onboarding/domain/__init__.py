"""Domain layer.

Contains pure onboarding logic without I/O:
- validators: Configuration validation rules
- transformers: Wire format mapping in both directions
- factories: Default configuration trees
"""
