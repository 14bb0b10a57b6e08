# Utility modules for the cabin trip planner
from .sanitizer import sanitize_text, sanitize_name, sanitize_url, name_key
