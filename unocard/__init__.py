"""UNO rule engine and AI seats."""
