"""Font tables generated by build_font.py. Do not edit by hand."""
