"""Platform adapters: logging, terminal output and process environment."""
