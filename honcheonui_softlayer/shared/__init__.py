"""Settings and logging shared by the provider and the CLI."""
