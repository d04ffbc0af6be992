"""Host adapters that feed keys to the engine and render its state."""
