"""Wire codecs for backend records and dashboard output."""
