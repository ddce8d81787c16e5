"""Output paths and Parquet schemas."""
