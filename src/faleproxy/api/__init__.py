"""HTTP adapter around the pipeline."""
