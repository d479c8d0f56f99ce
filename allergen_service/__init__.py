"""Allergen Identifier — dish and menu allergen lookups backed by Gemini."""
