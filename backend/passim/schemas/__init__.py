"""Wire-format schemas."""
