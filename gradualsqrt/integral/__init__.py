"""Integer math shared by the generators: codes, errors, reference roots."""
