"""CLI subcommands for pathctl."""
