"""Logical model description files"""
from .description import ColumnSpec, DatasetDescription, choose_column_types
