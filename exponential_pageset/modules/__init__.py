"""Feature modules for the pageset library."""
