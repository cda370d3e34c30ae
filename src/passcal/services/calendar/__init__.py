"""Calendar document construction."""
