"""Interactive Textual viewer."""
