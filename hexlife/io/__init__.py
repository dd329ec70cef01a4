"""I/O layer: GeoJSON serialization, Parquet schemas, and output paths."""
