"""Host adapters that render segment engine state."""
