"""Host adapters that drive an editor session from a UI toolkit."""
