"""Host adapters that paint sessions and feed them key input."""
