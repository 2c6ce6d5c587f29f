"""Extraction activities.

- extract_metadata: Product XML → FeatureRecord transform
- store_feature: Transform + hand-off to the feature store
"""
