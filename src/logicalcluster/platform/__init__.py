"""Platform services shared across the package."""
