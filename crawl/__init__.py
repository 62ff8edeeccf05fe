"""Turn-based dungeon-crawl simulation core."""
