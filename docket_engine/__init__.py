"""Dockets engine: entry model, persisted EntryStore, and view Coordinator."""
