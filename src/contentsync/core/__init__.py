"""Core domain: contracts, config, engine and stores."""
