"""Pure RUT domain logic: normalization, checksum, formatting, generation."""
