"""
sa_holiday_viewer.viewer

Viewer component package.
"""

from sa_holiday_viewer.viewer.component import COLUMNS, Column, HolidayViewer

__all__ = ["COLUMNS", "Column", "HolidayViewer"]
