"""GitHub gateway: URL parsing and pull request lookup."""
