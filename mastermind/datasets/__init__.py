from .validator import validate_codes, load_codes, pretty_summary

__all__ = ["validate_codes", "load_codes", "pretty_summary"]
