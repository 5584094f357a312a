"""Feature modules: accounts, individuals and custom module support."""
