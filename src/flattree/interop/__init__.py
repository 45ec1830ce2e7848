"""Test-vector ingestion and the ``flattree`` command line."""
