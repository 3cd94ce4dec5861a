"""Feature packages for promptpath."""
