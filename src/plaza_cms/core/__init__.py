"""Menu, navigation and content resolution."""
