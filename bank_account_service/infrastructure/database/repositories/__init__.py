"""SQLAlchemy implementations of the domain repository protocols."""
