"""Service layer: accounts, auth and the AI client."""
