"""mediashelf: personal digital-library catalog backend."""
