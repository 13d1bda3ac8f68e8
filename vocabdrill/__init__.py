"""Terminal flashcard drill for English vocabulary, with base-form highlighting of example sentences."""

__version__ = "0.1.0"