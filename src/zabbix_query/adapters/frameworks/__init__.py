"""Framework adapters serving the query core over HTTP."""
