"""Framework adapters exposing the scrape endpoints."""
