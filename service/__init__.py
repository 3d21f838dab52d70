"""HTTP service for the PDF extraction pipeline."""
