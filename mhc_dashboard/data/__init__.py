"""Survey data loading, normalization, and the in-memory dataset."""
from .normalize import clean_string, parse_number, normalize_row
from .loader import LoadError, load_records, fetch_records
from .schemas import CleanedRecord, Selection, ChartViews, FilterOptions
