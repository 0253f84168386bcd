"""Service layer helpers built on the WaniKani client."""

from .subject_service import fetch_all, sort_subjects
from .summary_service import get_formatted_summary

__all__ = ['fetch_all', 'sort_subjects', 'get_formatted_summary']
