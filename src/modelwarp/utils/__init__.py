"""Utility functions"""
from .sanitize import sanitize_name, dataset_name_from_path
