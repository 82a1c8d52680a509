"""Domain layer - files, extraction results, operations and link contracts."""
